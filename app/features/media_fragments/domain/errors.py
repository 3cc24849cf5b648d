class FragmentError(ValueError):
    """Base class for everything that makes a temporal fragment unusable."""


class TokenSyntaxError(FragmentError):
    """An NPT token matches none of the seconds / mm:ss / hh:mm:ss grammars."""


class MissingBoundsError(FragmentError):
    """Both the start and the end token of a 't' value are empty."""


class InvalidSpanError(FragmentError):
    """Resolved bounds do not form a span (negative start, end <= start)."""
