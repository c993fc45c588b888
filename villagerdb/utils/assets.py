from __future__ import annotations

from hashlib import md5
from pathlib import Path

from villagerdb.constants import HASH_LENGTH


def public_path(public_dir: Path, url: str) -> Path:
    """Map a site-absolute URL onto the file under ``public_dir``."""
    return public_dir / url.lstrip("/")


def create_file_hash(file_path: Path) -> str | None:
    """Return the short content hash of ``file_path``, or None if it is missing.

    Bytes are hashed as-is so binary images and UTF-8 text hash the same way.
    Errors other than a missing file propagate to the caller.
    """
    if not file_path.exists():
        return None
    digest = md5(file_path.read_bytes(), usedforsecurity=False).hexdigest()
    return digest[:HASH_LENGTH]


def add_hash_to_url(input_url: str, file_hash: str) -> str:
    """Insert ``file_hash`` as a segment just before the file extension.

    ``"/css/site.css"`` becomes ``"/css/site.<hash>.css"``. A final path
    segment without an extension gets the hash appended instead.
    """
    last_segment = input_url.rsplit("/", 1)[-1]
    if "." not in last_segment:
        return f"{input_url}.{file_hash}"
    file_parts = input_url.split(".")
    return ".".join([*file_parts[:-1], file_hash, file_parts[-1]])
