"""Utility helpers for turning extracted text into safe file names."""

from __future__ import annotations

import re

UNSAFE_FILENAME_PATTERN = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f]+')
# Filesystems limit names to 255 bytes; keep room for the extension.
MAX_FILENAME_BYTES = 200


def sanitize_filename(value: str, fallback: str = "recipe") -> str:
    """Replace characters that are unsafe in a file name with underscores."""
    normalized = UNSAFE_FILENAME_PATTERN.sub("_", value).strip(" .")
    encoded = normalized.encode("utf-8")[:MAX_FILENAME_BYTES]
    normalized = encoded.decode("utf-8", "ignore").rstrip(" .")
    return normalized or fallback
