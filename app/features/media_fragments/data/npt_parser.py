"""
Normal Play Time (NPT) token parsing.

Accepted forms (each optionally prefixed with "npt:"):
    12        12.5        seconds
    01:02     01:02.5     mm:ss, both fields 00-59
    1:02:03   10:02:03.5  hh:mm:ss, hours unbounded, mm/ss 00-59
"""
import logging
import math
import re
from typing import Optional

from ..domain.errors import TokenSyntaxError

logger = logging.getLogger(__name__)

NPT_SCHEME = "npt:"

_NPT_BODY = re.compile(r"[0-9.:]+")
_NPT_SECONDS = re.compile(r"(?P<ss>[0-9]+(?:\.[0-9]+)?)")
_NPT_MMSS = re.compile(r"(?P<mm>[0-5][0-9]):(?P<ss>[0-5][0-9](?:\.[0-9]+)?)")
_NPT_HHMMSS = re.compile(r"(?P<hh>[0-9]+):(?P<mm>[0-5][0-9]):(?P<ss>[0-5][0-9](?:\.[0-9]+)?)")


def strip_npt_scheme(token: str) -> str:
    if token.startswith(NPT_SCHEME):
        return token[len(NPT_SCHEME):]
    return token


def parse_npt_token(token: str) -> float:
    """
    Converts one NPT token to seconds.

    Raises:
        TokenSyntaxError: If the token matches none of the NPT grammars,
            or names a time too large to represent.
    """
    body = strip_npt_scheme(token)
    if not _NPT_BODY.fullmatch(body):
        raise TokenSyntaxError(f"Not an NPT time: {token!r}")

    # Fields go through float(): hh is unbounded and may exceed the float range
    match = _NPT_SECONDS.fullmatch(body)
    if match:
        return _finite(float(match["ss"]), token)

    match = _NPT_MMSS.fullmatch(body)
    if match:
        return float(match["mm"]) * 60 + float(match["ss"])

    match = _NPT_HHMMSS.fullmatch(body)
    if match:
        seconds = float(match["hh"]) * 3600 + float(match["mm"]) * 60 + float(match["ss"])
        return _finite(seconds, token)

    raise TokenSyntaxError(f"NPT time out of range or malformed: {token!r}")


def _finite(seconds: float, token: str) -> float:
    if math.isinf(seconds):
        raise TokenSyntaxError(f"NPT time too large: {token[:32]!r}...")
    return seconds


def try_parse_npt_token(token: str) -> Optional[float]:
    """Same as parse_npt_token, but reports failure as None."""
    try:
        return parse_npt_token(token)
    except TokenSyntaxError as e:
        logger.debug(str(e))
        return None
