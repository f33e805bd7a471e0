"""Share-link codec.

A profile travels as URL-safe base64 of its compact JSON, in a single query
parameter. Decoding never raises: anything unusable means "no share data".
"""

import base64
import binascii
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..config import settings
from ..models.profile import CareerProfile
from ..utils.logging import get_logger

logger = get_logger(__name__)


def encode_profile(profile: CareerProfile) -> str:
    """Encode a profile as an unpadded URL-safe base64 payload."""
    raw = profile.to_json().encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_profile(payload: str) -> CareerProfile | None:
    """Decode a share payload back into a profile.

    Accepts padded or unpadded input in either base64 alphabet. A "+" that
    arrived as a space through query-string decoding is restored.

    Returns:
        The decoded profile, or None if the payload is unusable
    """
    text = payload.strip().replace(" ", "+").translate(str.maketrans("+/", "-_"))
    text += "=" * (-len(text) % 4)

    try:
        raw = base64.b64decode(text, altchars=b"-_", validate=True)
        return CareerProfile.from_json(raw.decode("utf-8"))
    except (binascii.Error, ValueError) as e:
        # pydantic.ValidationError and UnicodeDecodeError are ValueErrors
        logger.warning("Invalid share data: %s", type(e).__name__)
        return None


def build_share_url(base_url: str, profile: CareerProfile, param: str | None = None) -> str:
    """Build a share link for profile on the base of base_url.

    The existing query string and fragment of base_url are dropped.
    """
    parts = urlsplit(base_url)
    query = urlencode({param or settings.share_param: encode_profile(profile)})
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, ""))


def extract_share_payload(url: str, param: str | None = None) -> tuple[str | None, str]:
    """Split the share parameter out of a URL.

    Returns:
        Tuple of (payload or None, url without the share parameter)
    """
    name = param or settings.share_param
    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)

    payload = next((value for key, value in pairs if key == name), None)
    if payload is None:
        return None, url

    remaining = urlencode([(key, value) for key, value in pairs if key != name])
    return payload or None, urlunsplit(
        (parts.scheme, parts.netloc, parts.path, remaining, parts.fragment)
    )
