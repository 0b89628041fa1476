# pdfmerger/errors.py

from __future__ import annotations


class MergerError(Exception):
    """Base class for failures reported to the user as an alert."""

    message = "Unable to complete the requested action."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmptyQueue(MergerError):
    message = "Please add some PDFs before merging."


class NoSelection(MergerError):
    message = "Please select a PDF file before attempting to remove it."


class SourceNotFound(MergerError):
    """A single input could not be opened for registration."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to open {path}" + (f": {reason}" if reason else ""))


class SourceUnreadable(MergerError):
    message = (
        "Unable to merge selected PDFs, ensure that they exist and that "
        "you have read permission for each file."
    )

    def __init__(self, paths=None):
        self.paths = list(paths or [])
        super().__init__()


class MergeIOFailure(MergerError):
    message = (
        "Unable to merge the PDF documents. Ensure that all files are readable, "
        "and that you have enough free memory to process the conversion."
    )
