from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

import pytest
from PyPDF2 import PdfWriter


class FakePicker:
    """Hands out queued answers for the open and save dialogs."""

    def __init__(self, open_paths=None, save_path: Optional[str] = None):
        self.open_paths = list(open_paths or [])
        self.save_path = save_path
        self.open_calls = 0
        self.save_calls = 0

    def choose_open(self) -> Optional[str]:
        self.open_calls += 1
        return self.open_paths.pop(0) if self.open_paths else None

    def choose_save(self) -> Optional[str]:
        self.save_calls += 1
        return self.save_path


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write a PDF whose pages are all ``width`` points wide."""

    def _create(filename: str, width: float = 72, pages: int = 1) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=width, height=72)
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def messages() -> List[str]:
    return []


@pytest.fixture()
def make_picker():
    return FakePicker


@pytest.fixture()
def damaged_pdf(tmp_path: Path) -> Path:
    """A PDF whose startxref points past the end of the file."""
    path = tmp_path / "damaged.pdf"
    path.write_bytes(
        b"%PDF-1.4\n1 0 obj<</Type/Catalog/Pages 2 0 R>>endobj\n"
        b"trailer<</Root 1 0 R>>\nstartxref\n99999\n%%EOF"
    )
    return path
