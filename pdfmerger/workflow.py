# pdfmerger/workflow.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Protocol

from pdfmerger.errors import (
    EmptyQueue,
    MergerError,
    SourceNotFound,
    SourceUnreadable,
)
from pdfmerger.merge_queue import (
    ButtonStates,
    add_file,
    clear_files,
    derive_button_states,
    remove_file,
)
from pdfmerger.pdf_merger import PdfMergeSession

logger = logging.getLogger(__name__)

SAVE_LOCATION_PROMPT = "Please select a save file location."


class FilePicker(Protocol):
    def choose_open(self) -> Optional[str]: ...

    def choose_save(self) -> Optional[str]: ...


@dataclass
class MergeResult:
    destination: Optional[str] = None
    error: Optional[MergerError] = None

    @property
    def succeeded(self) -> bool:
        return self.destination is not None and self.error is None


class MergeWorkflow:
    """
    Ordered list of PDFs driven by the Add / Remove / Merge actions.

    Every failure is turned into a call to ``notify`` right where it is
    detected; nothing is raised to the caller.
    """

    def __init__(
        self,
        picker: FilePicker,
        notify: Callable[[str], None],
        session_factory: Callable[[], PdfMergeSession] = PdfMergeSession,
        on_change: Optional[Callable[[List[str], ButtonStates], None]] = None,
    ):
        self.picker = picker
        self.notify = notify
        self.session_factory = session_factory
        self.on_change = on_change
        self.pdf_files: List[str] = []

    @property
    def button_states(self) -> ButtonStates:
        return derive_button_states(len(self.pdf_files))

    def _changed(self) -> None:
        if self.on_change:
            self.on_change(list(self.pdf_files), self.button_states)

    def add(self) -> bool:
        added = add_file(self.pdf_files, self.picker.choose_open())
        if added:
            self._changed()
        return added

    def remove(self, selected_index: Optional[int]) -> Optional[MergerError]:
        try:
            remove_file(self.pdf_files, selected_index)
        except MergerError as e:
            self.notify(e.message)
            return e
        self._changed()
        return None

    def merge(self) -> MergeResult:
        if not self.pdf_files:
            error = EmptyQueue()
            self.notify(error.message)
            return MergeResult(error=error)

        try:
            return self._merge_queued()
        finally:
            # Retrying means adding the files again, whatever the outcome.
            clear_files(self.pdf_files)
            self._changed()

    def _merge_queued(self) -> MergeResult:
        with self.session_factory() as session:
            failed = []
            for path in self.pdf_files:
                try:
                    session.register(path)
                except SourceNotFound as e:
                    logger.warning("Cannot open %s: %s", e.path, e.reason)
                    failed.append(path)

            if failed:
                error = SourceUnreadable(failed)
                self.notify(error.message)
                return MergeResult(error=error)

            self.notify(SAVE_LOCATION_PROMPT)
            destination = self.picker.choose_save()
            if not destination:
                logger.info("Merge cancelled, no destination chosen")
                return MergeResult()

            logger.info("Merging %d file(s) into %s", len(self.pdf_files), destination)
            try:
                session.merge_all(destination)
            except MergerError as e:
                logger.error("Merge into %s failed", destination, exc_info=True)
                self.notify(e.message)
                return MergeResult(error=e)

        self.notify(f"PDFs merged into: {Path(destination).name}")
        return MergeResult(destination=destination)
