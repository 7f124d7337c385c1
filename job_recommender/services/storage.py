"""Resume storage collaborators: local uploads directory and remote (HTTP) resume URLs."""

import os
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from job_recommender.config import HTTP_TIMEOUT_SECONDS, UPLOADS_ROOT
from job_recommender.utils.logger import get_logger

logger = get_logger(__name__)


class ResumeStorage(ABC):
    """Read-only access to stored resume files. Absence is not an error."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        ...

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Return the file content. Callers check exists() first; may raise OSError."""
        ...


class LocalResumeStorage(ResumeStorage):
    """Files on disk. URL-style paths (/uploads/...) resolve against the uploads root."""

    def __init__(self, root: Optional[str] = None) -> None:
        self._root = root or UPLOADS_ROOT

    def resolve(self, path: str) -> str:
        if path.startswith("/uploads") or path.startswith("uploads"):
            return os.path.join(self._root, path.lstrip("/"))
        return path

    def exists(self, path: str) -> bool:
        return os.path.isfile(self.resolve(path))

    def read_bytes(self, path: str) -> bytes:
        with open(self.resolve(path), "rb") as f:
            return f.read()


class HttpResumeStorage(ResumeStorage):
    """Resumes served over HTTP(S), e.g. from a blob store. Responses are cached per instance."""

    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._cache: dict[str, Optional[bytes]] = {}

    def _fetch(self, url: str) -> Optional[bytes]:
        if url in self._cache:
            return self._cache[url]
        content: Optional[bytes] = None
        try:
            with httpx.Client(
                follow_redirects=True,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                content = response.content
        except httpx.HTTPStatusError as e:
            logger.warning("HTTP error %s for resume %s", e.response.status_code, url)
        except httpx.HTTPError as e:
            logger.warning("Resume request failed for %s: %s", url, str(e))
        self._cache[url] = content
        return content

    def exists(self, path: str) -> bool:
        return self._fetch(path) is not None

    def read_bytes(self, path: str) -> bytes:
        content = self._fetch(path)
        if content is None:
            raise FileNotFoundError(path)
        return content


def is_remote_path(path: str) -> bool:
    lower = (path or "").lower()
    return lower.startswith("http://") or lower.startswith("https://")


def get_resume_storage(path: Optional[str] = None) -> ResumeStorage:
    """Return the storage that can serve the given resume reference."""
    if path and is_remote_path(path):
        return HttpResumeStorage()
    return LocalResumeStorage()
