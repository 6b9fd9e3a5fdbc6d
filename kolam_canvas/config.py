import logging
import os

from dotenv import load_dotenv

# Load Environment Variables (may include a UTF-8 BOM if file saved with BOM)
load_dotenv()

_BOM = "\ufeff"

_TRUE = {"1", "true", "yes", "on"}


def get_env(name, default=None):
    """Read an environment variable, tolerating a UTF-8 BOM.

    A .env saved with a BOM can make python-dotenv register the first key as
    '\\ufeffNAME', and the BOM can also leak into the value.
    """
    value = os.environ.get(name)
    if value is None:
        value = os.environ.get(f"{_BOM}{name}")
    if value is None:
        return default
    return value.lstrip(_BOM).strip()


def _env_int(name, default):
    value = get_env(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning("[Config] %s=%r is not an integer, using %s", name, value, default)
        return default


def _env_float(name, default):
    value = get_env(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logging.getLogger(__name__).warning("[Config] %s=%r is not a number, using %s", name, value, default)
        return default


class CanvasConfig:
    def __init__(
        self,
        width=400,
        height=400,
        grid_size=9,
        dot_spacing=40,
        show_symmetry=False,
        export_dir="static",
        log_level="INFO",
    ):
        self.width = width
        self.height = height
        self.grid_size = grid_size
        self.dot_spacing = dot_spacing
        self.show_symmetry = show_symmetry
        self.export_dir = export_dir
        self.log_level = log_level

    @classmethod
    def from_env(cls):
        return cls(
            width=_env_int("KOLAM_CANVAS_WIDTH", 400),
            height=_env_int("KOLAM_CANVAS_HEIGHT", 400),
            grid_size=_env_int("KOLAM_GRID_SIZE", 9),
            dot_spacing=_env_float("KOLAM_DOT_SPACING", 40.0),
            show_symmetry=(get_env("KOLAM_SHOW_SYMMETRY", "false").lower() in _TRUE),
            export_dir=get_env("KOLAM_EXPORT_DIR", "static"),
            log_level=get_env("KOLAM_LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


__all__ = ["CanvasConfig", "configure_logging", "get_env"]
