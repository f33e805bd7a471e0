"""Session state: controller, persisted storage and share links."""

from .controller import (
    GENERATION_ERROR_MESSAGE,
    PLAN_KEY,
    PROFILE_KEY,
    SessionController,
    SessionState,
)
from .share import build_share_url, decode_profile, encode_profile, extract_share_payload
from .storage import JSONFileStorage, MemoryStorage, Storage

__all__ = [
    "GENERATION_ERROR_MESSAGE",
    "PLAN_KEY",
    "PROFILE_KEY",
    "JSONFileStorage",
    "MemoryStorage",
    "SessionController",
    "SessionState",
    "Storage",
    "build_share_url",
    "decode_profile",
    "encode_profile",
    "extract_share_payload",
]
