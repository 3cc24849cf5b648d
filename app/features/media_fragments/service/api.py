import logging
from typing import Optional
from urllib.parse import unquote, urlsplit, urlunsplit

from app.core.common.enums import FileType
from app.core.config.settings import settings
from ..data.fragment_query import fragment_parser
from ..domain.interfaces import IMediaLocator, IPlaybackHandle
from ..domain.models import EmbedResult, TimeSpan
from .controllers import bind_once, clamping_loop
from .extractor import extract_time_span, span_from_url

logger = logging.getLogger(__name__)


def classify_media_url(url: str) -> FileType:
    """
    Decides whether an external URL can be played as audio or video,
    judging by the extension of its path.
    """
    path = urlsplit(url).path
    ext = path.rsplit(".", 1)[-1].lower() if "." in path else ""

    if ext in settings.AUDIO_EXTS:
        return FileType.AUDIO
    if ext in settings.VIDEO_EXTS:
        return FileType.VIDEO
    return FileType.UNKNOWN


def with_fragment(url: str, fragment: str) -> str:
    """Replaces the fragment identifier of `url`, keeping everything else."""
    parts = urlsplit(url)
    return urlunsplit(parts._replace(fragment=fragment))


def embed_media(handle: IPlaybackHandle, embed_src: str) -> EmbedResult:
    """
    Public Service API: Bind an embedded player to the fragment of its embed URL.

    Args:
        handle: The player created for the embed.
        embed_src: The URL the document used for the embed, e.g. "clip.mp4#t=10,20&loop".

    The span (if any) is clamped for the life of the player and written into
    the player's own source URL. A bare "loop" key turns looping on.
    """
    # 1. Parse the embed fragment
    fragment = fragment_parser.fragment_of(embed_src)
    query = fragment_parser.parse(fragment) if fragment else {}
    span = extract_time_span(query)

    # 2. Carry the span into the player's source
    if span is not None:
        handle.src = with_fragment(handle.src, span.to_fragment())

    # 3. Loop flag: present without a value ("#t=1,2&loop")
    loop = settings.FRAGMENT_LOOP_KEY in query and query[settings.FRAGMENT_LOOP_KEY] is None
    if loop:
        handle.loop = True

    # 4. Install the persistent clamp
    clamping_loop.attach(handle, span)

    return EmbedResult(span=span, loop=loop)


def follow_link(href: str, locator: IMediaLocator) -> Optional[TimeSpan]:
    """
    Public Service API: Play the time range a link points at.

    Every player already showing the linked resource jumps to the range; if
    there is none, the locator opens one.

    Returns:
        The span that was applied, or None if the link has no valid temporal fragment.
    """
    span = span_from_url(href)
    if span is None:
        return None

    # Link paths are resolved relative to the workspace, without the leading '/'
    resource_path = unquote(urlsplit(href).path).lstrip("/")

    players = locator.find_open_players(resource_path)
    if not players:
        logger.info(f"No open player for {resource_path!r}, opening one")
        players = [locator.open_player(resource_path)]

    for player in players:
        bind_once(span, player)

    return span
