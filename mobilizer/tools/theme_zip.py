from __future__ import annotations

import io
import logging
import zipfile
import zlib
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import List, Union

from mobilizer.config import DEFAULT_MAX_ENTRY_BYTES
from mobilizer.tools.models import RawThemeFile

logger = logging.getLogger(__name__)

TEXT_EXTS = {".liquid", ".css", ".js"}

# Images, media and fonts never reach the parser.
BINARY_EXTS = {
    ".png", ".jpg", ".jpeg", ".webp", ".gif", ".avif", ".svg", ".ico",
    ".mp4", ".mov", ".webm", ".mp3", ".wav",
    ".pdf",
    ".woff", ".woff2", ".ttf", ".otf", ".eot",
}

IGNORED_PREFIXES = ("__MACOSX/",)

INVALID_ARCHIVE_MSG = "Please upload a valid Shopify theme ZIP file"

UNREADABLE_ENTRY_ERRORS = (zipfile.BadZipFile, zlib.error, OSError, RuntimeError, NotImplementedError)


class ThemeArchiveError(RuntimeError):
    pass


@dataclass
class ThemeArchive:
    name: str
    files: List[RawThemeFile] = field(default_factory=list)
    entries: List[str] = field(default_factory=list)

    @property
    def asset_entries(self) -> List[str]:
        return [e for e in self.entries if "assets/" in e]


def _wants_text(rel: str) -> bool:
    p = PurePosixPath(rel)
    ext = p.suffix.lower()
    if ext in BINARY_EXTS:
        return False
    if ext in TEXT_EXTS:
        return True
    return ext == ".json" and "config" in p.parts


def _archive_name(source: Union[Path, str, bytes], name: str) -> str:
    if name:
        return name[:-4] if name.lower().endswith(".zip") else name
    if isinstance(source, (str, Path)):
        return Path(source).stem
    return "theme"


def read_theme_archive(
    source: Union[Path, str, bytes],
    *,
    name: str = "",
    max_entry_bytes: int = DEFAULT_MAX_ENTRY_BYTES,
) -> ThemeArchive:
    """
    Read a theme ZIP (path or raw bytes) into decoded text files.
    """
    archive = ThemeArchive(name=_archive_name(source, name))
    handle = io.BytesIO(source) if isinstance(source, bytes) else Path(source)

    try:
        zf = zipfile.ZipFile(handle)
    except (zipfile.BadZipFile, OSError) as e:
        raise ThemeArchiveError(INVALID_ARCHIVE_MSG) from e

    with zf:
        for info in zf.infolist():
            rel = info.filename.replace("\\", "/")
            if info.is_dir() or rel.startswith(IGNORED_PREFIXES):
                continue
            archive.entries.append(rel)

            if not _wants_text(rel):
                continue
            if info.file_size > max_entry_bytes:
                logger.warning("Skipping %s: %d bytes exceeds limit of %d", rel, info.file_size, max_entry_bytes)
                continue

            try:
                data = zf.read(info)
            except UNREADABLE_ENTRY_ERRORS as e:
                # encrypted entries raise RuntimeError, unknown compression NotImplementedError
                logger.warning("Could not read %s from %s: %s", rel, archive.name, e)
                raise ThemeArchiveError(INVALID_ARCHIVE_MSG) from e
            archive.files.append(RawThemeFile(filename=rel, content=data.decode("utf-8", errors="replace")))

    if not archive.files:
        logger.warning("Archive %s contains no theme text files", archive.name)

    logger.info("Read %d text files from %s (%d entries)", len(archive.files), archive.name, len(archive.entries))
    return archive
