import logging
import math
import re
from typing import Mapping, Optional

from app.core.config.settings import settings
from ..data.fragment_query import fragment_parser
from ..data.npt_parser import parse_npt_token, strip_npt_scheme
from ..domain.errors import FragmentError, MissingBoundsError, TokenSyntaxError
from ..domain.interfaces import FragmentValue
from ..domain.models import TimeSpan

logger = logging.getLogger(__name__)

# t=<start>[,<end>]; see https://www.w3.org/TR/media-frags/#valid-uri
T_VALUE_PATTERN = re.compile(r"(?P<start>[\w:.]*?)(?:,(?P<end>[\w:.]*))?")


def extract_time_span(mapping: Mapping[str, FragmentValue]) -> Optional[TimeSpan]:
    """
    Resolves the 't' entry of a parsed fragment into a TimeSpan.

    Returns None when there is no temporal fragment, or when the one present is
    invalid. Invalid fragments are logged and otherwise treated as absent.
    """
    value = mapping.get(settings.FRAGMENT_TIME_KEY)
    if not isinstance(value, str):
        logger.debug(f"No temporal fragment in {dict(mapping)!r}")
        return None

    try:
        return _resolve(value)
    except FragmentError as e:
        logger.warning(f"Dropping temporal fragment t={value!r}: {e}")
        return None


def span_from_fragment(fragment: Optional[str]) -> Optional[TimeSpan]:
    """Parses a raw fragment identifier ("t=10,20&loop") and extracts its span."""
    if not fragment:
        return None
    return extract_time_span(fragment_parser.parse(fragment))


def span_from_url(url: str) -> Optional[TimeSpan]:
    return span_from_fragment(fragment_parser.fragment_of(url))


def _resolve(value: str) -> TimeSpan:
    match = T_VALUE_PATTERN.fullmatch(value)
    if match is None:
        raise TokenSyntaxError(f"Unexpected characters in {value!r}")

    start_token = match["start"]
    end_token = match["end"] or ""

    if start_token and end_token:
        start = parse_npt_token(start_token)
        end = parse_npt_token(end_token)
    elif start_token:
        start = parse_npt_token(start_token)
        end = math.inf
    elif end_token:
        start = 0.0
        end = parse_npt_token(end_token)
    else:
        raise MissingBoundsError("Missing start time and end time")

    # npt is the default format, so the scheme marker is dropped on re-embedding
    raw = strip_npt_scheme(start_token)
    if match["end"] is not None:
        raw += "," + strip_npt_scheme(end_token)

    return TimeSpan(start=start, end=end, raw=raw)
