from __future__ import annotations

import io
import logging
import zipfile
from typing import List, Optional

from .exceptions import ArchiveError
from .http import books_cdn_url
from .models import UnzippedEntry
from .providers import Provider, KetabProvider

logger = logging.getLogger(__name__)


def book_archive_url(book_id: int) -> str:
    return f"{books_cdn_url()}/{book_id}/{book_id}.data.zip"


def unzip_archive(data: bytes) -> List[UnzippedEntry]:
    """Extract every file of a zip archive held in memory, in archive order."""
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            entries = [
                UnzippedEntry(name=info.filename, data=zf.read(info))
                for info in zf.infolist()
                if not info.is_dir()
            ]
    except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError) as e:
        raise ArchiveError(f"Error during extraction: {e}") from e
    logger.debug("Extracted %d entries", len(entries))
    return entries


def download_book_contents(book_id: int, *, provider: Optional[Provider] = None) -> List[UnzippedEntry]:
    """Download the book data archive from the CDN and unpack it."""
    _prov = provider or KetabProvider()
    url = book_archive_url(book_id)
    return unzip_archive(_prov.get_bytes(url))


def find_json_entry(entries: List[UnzippedEntry]) -> UnzippedEntry:
    for entry in entries:
        if entry.name.endswith(".json"):
            return entry
    logger.warning("Archive entries without JSON payload: %s", [e.name for e in entries])
    raise ArchiveError("No JSON file found in downloaded archive")
