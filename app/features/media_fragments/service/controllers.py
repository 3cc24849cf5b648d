import logging
import weakref
from typing import Optional

from app.core.common.enums import PlaybackEvent
from ..domain.interfaces import IPlaybackHandle
from ..domain.models import TimeSpan

logger = logging.getLogger(__name__)


def _require_span(span: TimeSpan) -> TimeSpan:
    if not isinstance(span, TimeSpan):
        raise TypeError(f"Expected a TimeSpan, got {type(span).__name__}")
    # Re-checked here: a span rebuilt with object.__setattr__ skips __post_init__
    span.validate()
    return span


class JumpAndStopController:
    """
    One-shot binder for following a link to a time range.

    Seeks to the start, plays, and pauses the first time the end is reached.
    Seeking elsewhere afterwards is left alone. A new jump replaces the stop
    watch left by a previous one on the same handle.
    """

    def __init__(self):
        self._watches: "weakref.WeakKeyDictionary[IPlaybackHandle, object]" = weakref.WeakKeyDictionary()

    def bind_once(self, span: TimeSpan, handle: IPlaybackHandle) -> None:
        _require_span(span)

        if span.is_unbounded:
            self._clear_watch(handle)
        else:
            def stop_at_end(player: IPlaybackHandle) -> None:
                if player.current_time >= span.end:
                    player.pause()
                    self._clear_watch(player)
                    logger.debug(f"Reached {span.end}s, stopped {player.src!r}")

            handle.set_listener(PlaybackEvent.TIME_UPDATE, stop_at_end)
            self._watches[handle] = stop_at_end

        handle.current_time = span.start
        if handle.paused:
            handle.play()

        logger.info(f"Jumped {handle.src!r} to t={span.raw}")

    def has_watch(self, handle: IPlaybackHandle) -> bool:
        return handle in self._watches

    def _clear_watch(self, handle: IPlaybackHandle) -> None:
        # Only a watch installed here is removed; other listeners stay
        if self._watches.pop(handle, None) is not None:
            handle.set_listener(PlaybackEvent.TIME_UPDATE, None)


class ClampingLoopController:
    """
    Persistent binder for embedded players.

    Keeps the position of every attached handle inside its span for the
    handle's whole life: pauses (or rewinds, when the handle loops) at the end
    and snaps back to the start when playback resumes outside the span.

    Bound spans live in a side-table keyed by handle; the entry goes away with
    the handle itself.
    """

    def __init__(self):
        self._spans: "weakref.WeakKeyDictionary[IPlaybackHandle, TimeSpan]" = weakref.WeakKeyDictionary()

    def attach(self, handle: IPlaybackHandle, span: Optional[TimeSpan] = None) -> None:
        if span is not None:
            self._spans[handle] = _require_span(span)
            logger.info(f"Clamping {handle.src!r} to t={span.raw}")

        handle.set_listener(PlaybackEvent.PLAYING, self._on_playing)
        handle.set_listener(PlaybackEvent.TIME_UPDATE, self._on_time_update)

    def span_for(self, handle: IPlaybackHandle) -> Optional[TimeSpan]:
        return self._spans.get(handle)

    def _on_playing(self, handle: IPlaybackHandle) -> None:
        span = self._spans.get(handle)
        if span is None:
            return

        position = handle.current_time
        if position > span.end or position < span.start:
            logger.debug(f"Resumed at {position}s outside t={span.raw}, seeking to {span.start}s")
            handle.current_time = span.start

    def _on_time_update(self, handle: IPlaybackHandle) -> None:
        span = self._spans.get(handle)
        if span is None or handle.current_time <= span.end:
            return

        if handle.loop:
            handle.current_time = span.start
        else:
            handle.pause()


jump_and_stop = JumpAndStopController()
clamping_loop = ClampingLoopController()


def bind_once(span: TimeSpan, handle: IPlaybackHandle) -> None:
    jump_and_stop.bind_once(span, handle)
