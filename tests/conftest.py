"""Shared fixtures for recommender tests."""

import pytest

from job_recommender.schemas.job_posting import JobPosting
from job_recommender.services.storage import LocalResumeStorage


def build_pdf(text: str) -> bytes:
    """Minimal single-page PDF with one line of Helvetica text (no parentheses in text)."""
    content = b"BT /F1 12 Tf 72 720 Td (" + text.encode("latin-1") + b") Tj ET"
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, obj in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + obj + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += b"%010d 00000 n \n" % off
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_at)
    return bytes(out)


def build_docx(paragraphs) -> bytes:
    from io import BytesIO

    from docx import Document

    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    bio = BytesIO()
    doc.save(bio)
    return bio.getvalue()


@pytest.fixture
def uploads(tmp_path):
    """Uploads root with a resumes/ directory; returns (storage, resumes_dir)."""
    resumes = tmp_path / "uploads" / "resumes"
    resumes.mkdir(parents=True)
    return LocalResumeStorage(root=str(tmp_path)), resumes


@pytest.fixture
def make_job():
    counter = {"n": 0}

    def _make(title="Developer", skills=None, **kwargs):
        counter["n"] += 1
        data = {
            "id": kwargs.pop("id", f"job-{counter['n']}"),
            "title": title,
            "company": kwargs.pop("company", "Acme"),
            "location": kwargs.pop("location", "Remote"),
            "skills": skills or [],
        }
        data.update(kwargs)
        return JobPosting(**data)

    return _make


@pytest.fixture
def pdf_bytes():
    return build_pdf


@pytest.fixture
def docx_bytes():
    return build_docx
