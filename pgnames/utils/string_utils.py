"""String utilities for building length-limited resource names."""

from __future__ import annotations

import hashlib

from .dns import DNS1123_LABEL_MAX_LENGTH

FINGERPRINT_LENGTH = 16
MAX_LABEL_LENGTH = DNS1123_LABEL_MAX_LENGTH


def fingerprint(value: str, length: int = FINGERPRINT_LENGTH) -> str:
    """Return the deterministic hex fingerprint of a string."""
    digest = hashlib.sha256(value.encode("utf-8")).hexdigest()
    return digest[:length]


def truncate_label(base: str, suffix: str = "", max_length: int = MAX_LABEL_LENGTH) -> str:
    """Join base and suffix, shortening the base with a fingerprint if needed.

    If the joined name exceeds max_length, the base is truncated and a short
    hash of the full, untruncated name is inserted before the suffix. The
    suffix itself is always kept so the name can still be traced back to the
    kind of object it identifies.

    Args:
        base: Leading part of the name (usually the owner's name)
        suffix: Trailing part of the name, kept verbatim
        max_length: Maximum allowed length (default 63)

    Returns:
        base + suffix if within limit, otherwise <base-prefix>-<hash><suffix>

    Raises:
        ValueError: If the suffix leaves no room for the fingerprint
    """
    name = f"{base}{suffix}"
    if len(name) <= max_length:
        return name

    short_hash = fingerprint(name)

    available_for_prefix = max_length - len(suffix) - 1 - FINGERPRINT_LENGTH
    if available_for_prefix < 0:
        raise ValueError(
            f"Suffix '{suffix}' is too long for a name of at most {max_length} characters"
        )

    truncated_prefix = base[:available_for_prefix].rstrip("-")
    if not truncated_prefix:
        return f"{short_hash}{suffix}"

    return f"{truncated_prefix}-{short_hash}{suffix}"
