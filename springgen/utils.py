"""Loading of project documents.

A project document is a JSON object read from a local file or fetched over
HTTP. Both loaders return ``(source, data)`` so callers can report where a
project came from.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30


class ProjectLoaderError(Exception):
    """Raised when a project document cannot be read or parsed."""

    pass


def load_document_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Read and parse a JSON document from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        ProjectLoaderError: If it cannot be read or is not valid JSON.
    """
    path = Path(file_path)
    if not path.exists():
        logger.error("File not found: %s", path)
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() != ".json":
        logger.warning("%s has no .json extension; parsing it as JSON anyway", path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", path, e)
        raise ProjectLoaderError(f"Invalid JSON in file {path}: {e}") from e
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        raise ProjectLoaderError(f"Cannot read file {path}: {e}") from e

    logger.info("Loaded project document from %s", path)
    return str(path), data


def load_document_from_url(url: str, timeout: int = DEFAULT_TIMEOUT) -> tuple[str, Any]:
    """Fetch and parse a JSON document over HTTP(S).

    Raises:
        ProjectLoaderError: For malformed URLs, network or HTTP failures and
            responses that are not JSON.
    """
    parsed = urlparse(url)
    if not (parsed.scheme and parsed.netloc):
        raise ProjectLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching project document from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        content_type = response.headers.get("content-type", "").lower()
        if "application/json" not in content_type and not url.endswith(".json"):
            logger.warning("Unexpected content type %r from %s", content_type, url)
        data = response.json()
    except requests.exceptions.Timeout as e:
        raise ProjectLoaderError(f"Request timeout after {timeout}s for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise ProjectLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    # JSONDecodeError derives from RequestException, so it is caught first
    except requests.exceptions.JSONDecodeError as e:
        raise ProjectLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        raise ProjectLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info("Loaded project document from %s", url)
    return url, data


def load_project_document(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> tuple[str, Any]:
    """Load a project document from exactly one of ``file_path`` or ``url``."""
    if file_path and url:
        raise ProjectLoaderError("Cannot load from both a file and a URL")
    if file_path:
        return load_document_from_file(file_path)
    if url:
        return load_document_from_url(url, timeout)
    raise ProjectLoaderError("Either a file path or a URL is required")
