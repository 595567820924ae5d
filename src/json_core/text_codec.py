"""UTF-8 byte codec used as the last step of serialize / deserialize."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def encode_utf8(text: str) -> bytes:
    return text.encode("utf-8")


def decode_utf8(data: bytes) -> str | None:
    """Strict UTF-8 decode; invalid input gives None."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.debug("UTF-8 decode failed: %s", exc)
        return None
