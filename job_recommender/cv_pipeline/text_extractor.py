"""Extract normalized plain text from stored resume files (PDF, DOCX, TXT).

Every failure mode (missing file, unsupported format, parser error, timeout)
degrades to an empty string so recommendations can still be computed from the
declared profile alone.
"""

import asyncio
import concurrent.futures
import re
from abc import ABC, abstractmethod
from io import BytesIO
from typing import Optional

from job_recommender.config import EXTRACTION_TIMEOUT_SECONDS
from job_recommender.errors import ExtractionError
from job_recommender.schemas.resume_document import ResumeFormat, detect_format
from job_recommender.services.storage import ResumeStorage, get_resume_storage
from job_recommender.utils.logger import get_logger

logger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
# Keep word chars, whitespace and - + # . @ (c++, c#, node.js, emails)
_STRIP_RE = re.compile(r"[^\w\s\-+#.@]", re.ASCII)


def clean_resume_text(text: str) -> str:
    """Collapse whitespace, strip punctuation except - + # . @, trim and lower-case."""
    if not text:
        return ""
    t = _WHITESPACE_RE.sub(" ", text)
    t = _STRIP_RE.sub(" ", t)
    t = _WHITESPACE_RE.sub(" ", t)
    return t.strip().lower()


class TextExtractor(ABC):
    """Turns raw document bytes into text. Raises ExtractionError on failure."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        ...


class PdfTextExtractor(TextExtractor):
    """PDF text via pdfplumber."""

    def extract(self, data: bytes) -> str:
        try:
            import pdfplumber
        except ImportError as e:
            raise ExtractionError("pdfplumber not installed; install with: pip install pdfplumber") from e
        try:
            with pdfplumber.open(BytesIO(data)) as pdf:
                parts = []
                for page in pdf.pages:
                    ptext = page.extract_text()
                    if ptext:
                        parts.append(ptext)
                return "\n\n".join(parts)
        except Exception as e:
            raise ExtractionError(f"PDF extraction failed: {e}") from e


class DocxTextExtractor(TextExtractor):
    """DOCX text via python-docx: paragraphs, then table cells."""

    def extract(self, data: bytes) -> str:
        try:
            from docx import Document
        except ImportError as e:
            raise ExtractionError("python-docx not installed; install with: pip install python-docx") from e
        try:
            doc = Document(BytesIO(data))
            parts = [p.text for p in doc.paragraphs if p.text.strip()]
            for table in doc.tables:
                for row in table.rows:
                    for cell in row.cells:
                        if cell.text.strip():
                            parts.append(cell.text)
            return "\n\n".join(parts)
        except Exception as e:
            raise ExtractionError(f"DOCX extraction failed: {e}") from e


class PlainTextExtractor(TextExtractor):
    def extract(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace")


_EXTRACTORS: dict = {
    ResumeFormat.PDF: PdfTextExtractor,
    ResumeFormat.DOCX: DocxTextExtractor,
    ResumeFormat.TXT: PlainTextExtractor,
}


def get_text_extractor(fmt: ResumeFormat) -> Optional[TextExtractor]:
    """Extractor for a format, or None when the format cannot be parsed (doc, unsupported)."""
    cls = _EXTRACTORS.get(fmt)
    return cls() if cls else None


def _read_and_extract(resume_path: str, storage: ResumeStorage) -> str:
    fmt = detect_format(resume_path)
    if fmt == ResumeFormat.DOC:
        logger.info("DOC format not supported, skipping resume: %s", resume_path)
        return ""
    extractor = get_text_extractor(fmt)
    if extractor is None:
        logger.warning("Unsupported resume format: %s", resume_path)
        return ""
    if not storage.exists(resume_path):
        logger.warning("Resume file not found: %s", resume_path)
        return ""
    data = storage.read_bytes(resume_path)
    return clean_resume_text(extractor.extract(data))


def _log_failure(error: BaseException, path: str, limit: float) -> None:
    if isinstance(error, (asyncio.TimeoutError, concurrent.futures.TimeoutError)):
        logger.warning("Resume extraction timed out after %.1fs: %s", limit, path)
    elif isinstance(error, ExtractionError):
        logger.warning("Resume extraction failed for %s: %s", path, error)
    else:
        logger.exception("Unexpected error parsing resume %s: %s", path, error)


async def extract_resume_text_async(
    resume_path: Optional[str],
    storage: Optional[ResumeStorage] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Read and parse a stored resume in a worker thread, bounded by a timeout.
    Returns normalized text, or "" on any failure. Never raises.
    """
    if not resume_path or not resume_path.strip():
        return ""
    path = resume_path.strip()
    limit = EXTRACTION_TIMEOUT_SECONDS if timeout is None else timeout
    try:
        if storage is None:
            storage = get_resume_storage(path)
        return await asyncio.wait_for(asyncio.to_thread(_read_and_extract, path, storage), limit)
    except Exception as e:
        _log_failure(e, path, limit)
    return ""


def _extract_in_worker(path: str, storage: Optional[ResumeStorage], limit: float) -> str:
    """Blocking extraction on a private worker thread; used when an event loop is already running."""
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
    try:
        if storage is None:
            storage = get_resume_storage(path)
        future = executor.submit(_read_and_extract, path, storage)
        return future.result(timeout=limit)
    except Exception as e:
        _log_failure(e, path, limit)
        return ""
    finally:
        # a hung parser thread is abandoned, not joined
        executor.shutdown(wait=False)


def extract_resume_text(
    resume_path: Optional[str],
    storage: Optional[ResumeStorage] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Sync entry point. Safe to call from plain code and from inside a running
    event loop (e.g. an async web handler); async callers should prefer
    extract_resume_text_async. Never raises.
    """
    if not resume_path or not resume_path.strip():
        return ""
    limit = EXTRACTION_TIMEOUT_SECONDS if timeout is None else timeout
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        return _extract_in_worker(resume_path.strip(), storage, limit)

    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(extract_resume_text_async(resume_path, storage, timeout))
    except Exception as e:
        _log_failure(e, resume_path.strip(), limit)
        return ""
    finally:
        loop.close()
