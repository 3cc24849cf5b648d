import logging
from typing import Optional
from urllib.parse import unquote, urlsplit

from ..domain.interfaces import FragmentQuery, IFragmentQueryParser

logger = logging.getLogger(__name__)

class UrlFragmentQueryParser(IFragmentQueryParser):
    """
    Parses "#t=10,20&loop" style fragment identifiers.

    Unlike urllib.parse.parse_qs, a bare key ("loop") is kept apart from an
    empty value ("loop="): the first maps to None, the second to "".
    """

    def fragment_of(self, url: str) -> Optional[str]:
        fragment = urlsplit(url).fragment
        return fragment or None

    def parse(self, fragment: str) -> FragmentQuery:
        result: FragmentQuery = {}
        fragment = fragment[1:] if fragment.startswith("#") else fragment

        for part in fragment.split("&"):
            if not part:
                continue

            if "=" in part:
                key, value = part.split("=", 1)
                value = unquote(value.replace("+", " "))
            else:
                key, value = part, None

            key = unquote(key.replace("+", " "))
            if not key:
                logger.debug(f"Ignoring fragment parameter without a key: {part!r}")
                continue

            # Repeated keys collect into a list, in order of appearance
            if key in result:
                existing = result[key]
                if isinstance(existing, list):
                    existing.append(value)
                else:
                    result[key] = [existing, value]
            else:
                result[key] = value

        return result


fragment_parser = UrlFragmentQueryParser()
