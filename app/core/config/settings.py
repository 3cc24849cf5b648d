# File: app/core/config/settings.py

import os


class Settings:
    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # --- Fragment Keys ---
    # Keys recognised in a media URL's fragment identifier (#t=10,20&loop)
    FRAGMENT_TIME_KEY: str = os.getenv("FRAGMENT_TIME_KEY", "t")
    FRAGMENT_LOOP_KEY: str = os.getenv("FRAGMENT_LOOP_KEY", "loop")

    # --- Media Classification ---
    # Extensions (without the dot) that an external embed may be played as
    AUDIO_EXTS = frozenset({"mp3", "wav", "m4a", "ogg", "3gp", "flac"})
    VIDEO_EXTS = frozenset({"mp4", "webm", "ogv"})


settings = Settings()
