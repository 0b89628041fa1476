import pytest
from PyPDF2 import PdfReader

from pdfmerger.errors import MergeIOFailure, SourceNotFound
from pdfmerger.pdf_merger import PdfMergeSession


def page_widths(path):
    return [float(page.mediabox.width) for page in PdfReader(str(path)).pages]


class TestRegister:

    def test_missing_file_raises_source_not_found(self, tmp_path):
        missing = str(tmp_path / "missing.pdf")
        with PdfMergeSession() as session:
            with pytest.raises(SourceNotFound) as excinfo:
                session.register(missing)
        assert excinfo.value.path == missing
        assert session.sources == []

    def test_directory_is_not_a_source(self, tmp_path):
        with PdfMergeSession() as session:
            with pytest.raises(SourceNotFound):
                session.register(str(tmp_path))

    def test_keeps_registration_order(self, pdf_factory):
        a = str(pdf_factory("a.pdf"))
        b = str(pdf_factory("b.pdf"))
        with PdfMergeSession() as session:
            session.register(b)
            session.register(a)
            session.register(b)
            assert session.sources == [b, a, b]
        assert session.sources == []


class TestMergeAll:

    def test_pages_follow_registration_order(self, pdf_factory, tmp_path):
        a = pdf_factory("a.pdf", width=100)
        b = pdf_factory("b.pdf", width=200, pages=2)
        out = tmp_path / "out.pdf"

        session = PdfMergeSession()
        session.register(str(a))
        session.register(str(b))
        assert session.merge_all(str(out)) == 3

        assert page_widths(out) == [100, 200, 200]
        assert session.sources == []

    def test_unreadable_pdf_raises_merge_failure(self, pdf_factory, tmp_path):
        good = pdf_factory("good.pdf")
        broken = tmp_path / "broken.pdf"
        broken.write_bytes(b"this is not a pdf document")
        out = tmp_path / "out.pdf"

        session = PdfMergeSession()
        session.register(str(good))
        session.register(str(broken))
        with pytest.raises(MergeIOFailure):
            session.merge_all(str(out))
        assert not out.exists()
        assert session.sources == []

    def test_unwritable_destination_raises_merge_failure(self, pdf_factory, tmp_path):
        session = PdfMergeSession()
        session.register(str(pdf_factory("a.pdf")))
        session.register(str(pdf_factory("b.pdf")))
        with pytest.raises(MergeIOFailure) as excinfo:
            session.merge_all(str(tmp_path / "no-such-dir" / "out.pdf"))
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_damaged_xref_raises_merge_failure(self, pdf_factory, damaged_pdf, tmp_path):
        out = tmp_path / "out.pdf"
        session = PdfMergeSession()
        session.register(str(pdf_factory("good.pdf")))
        session.register(str(damaged_pdf))
        with pytest.raises(MergeIOFailure) as excinfo:
            session.merge_all(str(out))
        assert excinfo.value.__cause__ is not None
        assert not out.exists()
        assert session.sources == []
