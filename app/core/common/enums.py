# File: app/core/common/enums.py

from enum import Enum, unique

@unique
class FileType(str, Enum):
    VIDEO = "video"
    AUDIO = "audio"
    UNKNOWN = "unknown"

@unique
class PlaybackEvent(str, Enum):
    PLAYING = "playing"          # playback started or resumed
    TIME_UPDATE = "timeupdate"   # current position changed
