"""Unique identifier generation."""
from __future__ import annotations

import base64
import uuid
from typing import Optional

from globalkit.config import get_settings

__all__ = ["create_uid"]


def create_uid(base64_encoded: Optional[bool] = None) -> str:
    """Return a new random identifier.

    By default (``Settings.base64_uids``) this is the base64 encoding of an
    upper-case UUID4 string; otherwise the 32 upper-case hex digits of the UUID.
    """

    if base64_encoded is None:
        base64_encoded = get_settings().base64_uids
    uid = str(uuid.uuid4()).upper()
    if base64_encoded:
        return base64.b64encode(uid.encode("utf-8")).decode("ascii")
    return uid.replace("-", "")
