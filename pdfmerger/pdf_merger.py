# pdfmerger/pdf_merger.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, List, Tuple

from PyPDF2 import PdfReader, PdfWriter
from PyPDF2.errors import PyPdfError

from pdfmerger.errors import MergeIOFailure, SourceNotFound

logger = logging.getLogger(__name__)

# PyPDF2 raises plain lookup errors on damaged cross-reference tables
MERGE_ERRORS = (
    PyPdfError, OSError, ValueError,
    KeyError, AttributeError, TypeError, IndexError,
)


class PdfMergeSession:
    """
    Collects input PDFs and concatenates their pages into one output file.

    Inputs are opened when registered and stay open until the merge
    finishes or the session is closed, whichever comes first.
    """

    def __init__(self):
        self._sources: List[Tuple[str, BinaryIO]] = []

    @property
    def sources(self) -> List[str]:
        return [path for path, _ in self._sources]

    def register(self, path: str) -> None:
        try:
            handle = open(path, "rb")
        except OSError as e:
            raise SourceNotFound(path, e.strerror or str(e)) from e
        self._sources.append((path, handle))

    def merge_all(self, destination: str) -> int:
        """Write every registered page, in registration order, to destination.

        Returns the number of pages written.
        """
        try:
            pdf_writer = PdfWriter()
            for path, handle in self._sources:
                pdf_reader = PdfReader(handle)
                for page in pdf_reader.pages:
                    pdf_writer.add_page(page)
                logger.debug("Appended %d page(s) from %s", len(pdf_reader.pages), path)

            with open(destination, "wb") as out_file:
                pdf_writer.write(out_file)
            page_count = len(pdf_writer.pages)
        except MERGE_ERRORS as e:
            raise MergeIOFailure() from e
        finally:
            self.close()

        logger.info("Wrote %d page(s) to %s", page_count, Path(destination).name)
        return page_count

    def close(self) -> None:
        for _, handle in self._sources:
            handle.close()
        self._sources = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
