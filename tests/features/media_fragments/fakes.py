# File: tests/features/media_fragments/fakes.py

import logging
from typing import Callable, Dict, Optional

from app.core.common.enums import PlaybackEvent
from app.features.media_fragments.domain.interfaces import IMediaLocator, IPlaybackHandle

logger = logging.getLogger(__name__)

Listener = Callable[[IPlaybackHandle], None]

class InMemoryPlayer(IPlaybackHandle):
    """
    Concrete IPlaybackHandle with no decoder behind it.
    Position only moves when the owner calls advance()/seek(), and events are
    delivered synchronously in the order they are emitted.
    """

    def __init__(self, src: str = "", duration: float = float("inf"), loop: bool = False):
        self._src = src
        self._duration = duration
        self._loop = loop
        self._position = 0.0
        self._paused = True
        self._listeners: Dict[PlaybackEvent, Listener] = {}

    # --- IPlaybackHandle ---

    @property
    def current_time(self) -> float:
        return self._position

    @current_time.setter
    def current_time(self, seconds: float) -> None:
        self._position = min(max(0.0, seconds), self._duration)

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def loop(self) -> bool:
        return self._loop

    @loop.setter
    def loop(self, enabled: bool) -> None:
        self._loop = bool(enabled)

    @property
    def src(self) -> str:
        return self._src

    @src.setter
    def src(self, url: str) -> None:
        self._src = url

    def play(self) -> None:
        if not self._paused:
            return
        self._paused = False
        self.emit(PlaybackEvent.PLAYING)

    def pause(self) -> None:
        self._paused = True

    def set_listener(self, event: PlaybackEvent, callback: Optional[Listener]) -> None:
        if callback is None:
            self._listeners.pop(event, None)
        else:
            self._listeners[event] = callback

    # --- Driving the simulation ---

    def has_listener(self, event: PlaybackEvent) -> bool:
        return event in self._listeners

    def emit(self, event: PlaybackEvent) -> None:
        listener = self._listeners.get(event)
        if listener is not None:
            listener(self)

    def seek(self, seconds: float) -> None:
        """External seek (user scrubbing): moves and reports the new position."""
        self.current_time = seconds
        self.emit(PlaybackEvent.TIME_UPDATE)

    def advance(self, seconds: float) -> None:
        """Plays `seconds` forward, reporting the position once at the end."""
        if self._paused:
            logger.debug(f"Ignoring advance({seconds}) on paused player {self._src!r}")
            return
        self.current_time = self._position + seconds
        self.emit(PlaybackEvent.TIME_UPDATE)


class FakeLocator(IMediaLocator):
    """
    Workspace stand-in: a list of open players keyed by resource path.
    """

    def __init__(self, open_players=None):
        self.open_players = dict(open_players or {})
        self.opened = []

    def find_open_players(self, resource_path):
        return [p for path, p in self.open_players.items() if resource_path in path]

    def open_player(self, resource_path):
        player = InMemoryPlayer(src=f"app://local/{resource_path}", duration=600)
        self.opened.append(player)
        return player
