from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Union

from app.core.common.enums import PlaybackEvent

FragmentValue = Union[str, None, List[Optional[str]]]
FragmentQuery = Dict[str, FragmentValue]


class IPlaybackHandle(ABC):
    """
    Contract for a live media player (HTML media element, GStreamer playbin, ...).
    The controllers never own the handle; they only read/seek it and hook its events.
    """

    @property
    @abstractmethod
    def current_time(self) -> float:
        """Playback position in seconds."""
        pass

    @current_time.setter
    @abstractmethod
    def current_time(self, seconds: float) -> None:
        pass

    @property
    @abstractmethod
    def paused(self) -> bool:
        pass

    @property
    @abstractmethod
    def loop(self) -> bool:
        pass

    @loop.setter
    @abstractmethod
    def loop(self, enabled: bool) -> None:
        pass

    @property
    @abstractmethod
    def src(self) -> str:
        """URL of the resource being played."""
        pass

    @src.setter
    @abstractmethod
    def src(self, url: str) -> None:
        pass

    @abstractmethod
    def play(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        pass

    @abstractmethod
    def set_listener(self, event: PlaybackEvent,
                     callback: Optional[Callable[["IPlaybackHandle"], None]]) -> None:
        """
        Installs the single listener for `event`, replacing any previous one.
        Passing None removes the listener.
        """
        pass


class IFragmentQueryParser(ABC):
    """
    Contract for turning a URL fragment identifier into a key/value mapping.
    """

    @abstractmethod
    def fragment_of(self, url: str) -> Optional[str]:
        """Returns the fragment identifier of `url` (without '#'), or None."""
        pass

    @abstractmethod
    def parse(self, fragment: str) -> FragmentQuery:
        """
        Splits `fragment` into a mapping.
        Bare keys map to None, repeated keys map to a list of values.
        """
        pass


class IMediaLocator(ABC):
    """
    Contract for the workspace that owns the media viewers.
    """

    @abstractmethod
    def find_open_players(self, resource_path: str) -> List[IPlaybackHandle]:
        """Players already showing a resource whose path contains `resource_path`."""
        pass

    @abstractmethod
    def open_player(self, resource_path: str) -> IPlaybackHandle:
        """
        Opens a new viewer for the resource and returns its player.

        Raises:
            FileNotFoundError: If the path does not resolve to a media resource.
        """
        pass
