"""Output colors for treeskel.

Defaults live on the ThemeColors model; a ``[colors]`` table in
~/.config/treeskel/theme.toml may override any of them.
"""

import functools
import logging
import re
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from treeskel.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors for transcript lines and stderr messages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    directory: str = "#69B9A1"
    file: str = "#c1ff62"
    warning: str = "#f5b332"
    error: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, v: object) -> str:
        if not isinstance(v, str) or not _HEX_COLOR.fullmatch(v.strip()):
            msg = f"expected #RGB or #RRGGBB, got {v!r}"
            raise ValueError(msg)
        return v.strip()

    def rgb(self, name: str) -> tuple[int, int, int]:
        """Return a color as an (r, g, b) tuple for click styling."""
        digits = getattr(self, name)[1:]
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def load_colors(path: Path | None = None) -> ThemeColors:
    """Read user color overrides, falling back to defaults on any problem.

    Args:
        path: Theme file to read. Defaults to the XDG config location.

    Returns:
        Validated ThemeColors.
    """
    path = path or get_theme_path()
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable theme %s: %s", path, e)
        return ThemeColors()

    try:
        return ThemeColors.model_validate(data.get("colors", {}))
    except ValidationError as e:
        logger.warning("Ignoring invalid theme %s: %s", path, e)
        return ThemeColors()


@functools.cache
def get_colors() -> ThemeColors:
    """Colors for this process, loaded once."""
    return load_colors()


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Styles used by the Rich stderr console."""
    return Theme({"warning": colors.warning, "error": f"bold {colors.error}"})
