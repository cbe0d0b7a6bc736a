import logging
import os

from dataclasses import dataclass
from typing import Optional

from PIL import Image

DEFAULT_TARGET_WIDTH = 800
DEFAULT_TARGET_HEIGHT = 600
DEFAULT_OUTPUT_FORMAT = "JPEG"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    target_width: int = DEFAULT_TARGET_WIDTH
    target_height: int = DEFAULT_TARGET_HEIGHT
    output_format: str = DEFAULT_OUTPUT_FORMAT
    # None keeps the encoder's own default quality
    output_quality: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def bounds(self):
        return self.target_width, self.target_height


def _positive_int(environ, name, default):
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")

    return value


def _choice(environ, name, default):
    return environ.get(name, default).strip().upper() or default


def _output_format(environ):
    fmt = _choice(environ, "RESIZE_OUTPUT_FORMAT", DEFAULT_OUTPUT_FORMAT)

    Image.init()
    if fmt not in Image.SAVE:
        raise ValueError(f"RESIZE_OUTPUT_FORMAT {fmt!r} is not a format Pillow can write")

    return fmt


def _log_level(environ):
    level = _choice(environ, "LOG_LEVEL", DEFAULT_LOG_LEVEL)

    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL {level!r} is not a logging level")

    return level


def load_settings(environ=os.environ):
    return Settings(
        target_width=_positive_int(
            environ, "RESIZE_TARGET_WIDTH", DEFAULT_TARGET_WIDTH
        ),
        target_height=_positive_int(
            environ, "RESIZE_TARGET_HEIGHT", DEFAULT_TARGET_HEIGHT
        ),
        output_format=_output_format(environ),
        output_quality=_positive_int(environ, "RESIZE_OUTPUT_QUALITY", None),
        log_level=_log_level(environ),
    )
