"""Tests for resume text extraction and normalization."""

import re
import time

import pytest

from job_recommender.cv_pipeline.text_extractor import (
    DocxTextExtractor,
    PdfTextExtractor,
    PlainTextExtractor,
    clean_resume_text,
    extract_resume_text,
    extract_resume_text_async,
    get_text_extractor,
)
from job_recommender.errors import ExtractionError
from job_recommender.schemas.resume_document import ResumeDocument, ResumeFormat, detect_format
from job_recommender.services.storage import ResumeStorage

ALLOWED = re.compile(r"^[a-z0-9\s\-+#.@]*$")


class SlowStorage(ResumeStorage):
    def exists(self, path):
        return True

    def read_bytes(self, path):
        time.sleep(1.0)
        return b"python"


class ExplodingStorage(ResumeStorage):
    def exists(self, path):
        return True

    def read_bytes(self, path):
        raise PermissionError("denied")


def test_clean_resume_text_normalizes():
    raw = "  Jane DOE\n\n(Senior) Developer!!  C++, C#, Node.js; jane@mail.com  "
    assert clean_resume_text(raw) == "jane doe senior developer c++ c# node.js jane@mail.com"


def test_clean_resume_text_empty():
    assert clean_resume_text("") == ""
    assert clean_resume_text(None) == ""


@pytest.mark.parametrize(
    "path, fmt",
    [
        ("cv.pdf", ResumeFormat.PDF),
        ("/uploads/resumes/CV.DOCX", ResumeFormat.DOCX),
        ("old.doc", ResumeFormat.DOC),
        ("notes.txt", ResumeFormat.TXT),
        ("image.png", ResumeFormat.UNSUPPORTED),
        ("noext", ResumeFormat.UNSUPPORTED),
        ("https://files.example.com/r/cv.pdf?sig=abc", ResumeFormat.PDF),
    ],
)
def test_detect_format(path, fmt):
    assert detect_format(path) == fmt
    assert ResumeDocument.from_path(path).format == fmt


def test_get_text_extractor_by_format():
    assert isinstance(get_text_extractor(ResumeFormat.PDF), PdfTextExtractor)
    assert isinstance(get_text_extractor(ResumeFormat.DOCX), DocxTextExtractor)
    assert isinstance(get_text_extractor(ResumeFormat.TXT), PlainTextExtractor)
    assert get_text_extractor(ResumeFormat.DOC) is None
    assert get_text_extractor(ResumeFormat.UNSUPPORTED) is None


def test_txt_resume_from_uploads_path(uploads):
    storage, resumes = uploads
    (resumes / "cv.txt").write_text("Senior Python Developer\n5+ years of experience!", encoding="utf-8")
    text = extract_resume_text("/uploads/resumes/cv.txt", storage=storage)
    assert text == "senior python developer 5+ years of experience"
    assert ALLOWED.match(text)


def test_relative_uploads_path_without_slash(uploads):
    storage, resumes = uploads
    (resumes / "cv.txt").write_text("Django", encoding="utf-8")
    assert extract_resume_text("uploads/resumes/cv.txt", storage=storage) == "django"


def test_docx_resume(uploads, docx_bytes):
    storage, resumes = uploads
    (resumes / "cv.docx").write_bytes(docx_bytes(["Jane Doe", "Skills: React, Node.js & MongoDB"]))
    text = extract_resume_text("/uploads/resumes/cv.docx", storage=storage)
    assert "jane doe" in text
    assert "react node.js mongodb" in text
    assert ALLOWED.match(text)


def test_pdf_resume(uploads, pdf_bytes):
    storage, resumes = uploads
    (resumes / "cv.pdf").write_bytes(pdf_bytes("Senior Python Developer with 5+ years of experience"))
    text = extract_resume_text("/uploads/resumes/cv.pdf", storage=storage)
    assert "python developer" in text
    assert text == text.lower()
    assert ALLOWED.match(text)


@pytest.mark.parametrize("name", ["cv.rtf", "cv.png", "cv", "cv.doc"])
def test_unsupported_and_doc_return_empty(uploads, name):
    storage, resumes = uploads
    (resumes / name).write_bytes(b"Python developer")
    assert extract_resume_text(f"/uploads/resumes/{name}", storage=storage) == ""


def test_missing_file_returns_empty(uploads):
    storage, _ = uploads
    assert extract_resume_text("/uploads/resumes/nope.pdf", storage=storage) == ""


@pytest.mark.parametrize("path", [None, "", "   "])
def test_no_path_returns_empty(path):
    assert extract_resume_text(path) == ""


@pytest.mark.parametrize("name, data", [("bad.pdf", b"not a pdf at all"), ("bad.docx", b"PK\x03\x04garbage")])
def test_corrupt_documents_return_empty(uploads, name, data):
    storage, resumes = uploads
    (resumes / name).write_bytes(data)
    assert extract_resume_text(f"/uploads/resumes/{name}", storage=storage) == ""


def test_parsers_raise_extraction_error():
    with pytest.raises(ExtractionError):
        PdfTextExtractor().extract(b"garbage")
    with pytest.raises(ExtractionError):
        DocxTextExtractor().extract(b"garbage")


def test_timeout_degrades_to_empty():
    started = time.monotonic()
    assert extract_resume_text("cv.txt", storage=SlowStorage(), timeout=0.1) == ""
    assert time.monotonic() - started < 0.9


def test_storage_error_degrades_to_empty():
    assert extract_resume_text("cv.txt", storage=ExplodingStorage()) == ""


def test_async_variant(uploads):
    import asyncio

    storage, resumes = uploads
    (resumes / "cv.txt").write_text("GraphQL", encoding="utf-8")
    text = asyncio.run(extract_resume_text_async("/uploads/resumes/cv.txt", storage=storage))
    assert text == "graphql"


def test_sync_entry_point_inside_running_loop(uploads):
    import asyncio

    storage, resumes = uploads
    (resumes / "cv.txt").write_text("Flask and Redis", encoding="utf-8")

    async def handler():
        return extract_resume_text("/uploads/resumes/cv.txt", storage=storage)

    assert asyncio.run(handler()) == "flask and redis"


def test_sync_entry_point_inside_running_loop_times_out():
    import asyncio

    async def handler():
        return extract_resume_text("cv.txt", storage=SlowStorage(), timeout=0.1)

    started = time.monotonic()
    assert asyncio.run(handler()) == ""
    assert time.monotonic() - started < 0.9
