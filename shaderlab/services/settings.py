"""
Settings management for ShaderLab.

Reads preferences from settings.ini. The file is optional and never
written: missing files or keys fall back to defaults.
"""

from configparser import ConfigParser, Error as ConfigError
from pathlib import Path
from typing import List, Optional, Union

from ..utils.logging import get_logger

logger = get_logger("settings")

PACKAGE_DIR = Path(__file__).parent.parent


class Settings:
    """Application settings from settings.ini."""

    # Settings file location (project root)
    SETTINGS_FILE = PACKAGE_DIR.parent / "settings.ini"
    DEFAULT_SAMPLE_IMAGE = PACKAGE_DIR / "resources" / "sample.ppm"

    # Section and keys
    SECTION = "preferences"
    KEY_SAMPLE_IMAGE = "sample_image"
    KEY_CATEGORIES = "categories"
    KEY_LOG_LEVEL = "log_level"

    DEFAULT_CATEGORIES = "blur"
    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """Initialize settings from file, or defaults if it is absent."""
        self.path = Path(path) if path is not None else self.SETTINGS_FILE
        self.config = ConfigParser()
        self._load()

    def _load(self) -> None:
        """Load settings from file if present."""
        if self.path.exists():
            try:
                self.config.read(self.path)
            except ConfigError as e:
                logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
                self.config = ConfigParser()
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)

    def _get(self, key: str, default: str) -> str:
        val = self.config.get(self.SECTION, key, fallback=default).strip()
        return val if val else default

    def get_sample_image(self) -> Path:
        """Path of the sample image. Relative paths resolve against the settings file."""
        val = self.config.get(self.SECTION, self.KEY_SAMPLE_IMAGE, fallback="").strip()
        if not val:
            return self.DEFAULT_SAMPLE_IMAGE
        path = Path(val).expanduser()
        if not path.is_absolute():
            path = self.path.parent / path
        return path

    def get_categories(self) -> List[str]:
        """Registry categories to discover filters from."""
        val = self._get(self.KEY_CATEGORIES, self.DEFAULT_CATEGORIES)
        categories = [c.strip() for c in val.split(",") if c.strip()]
        return categories or [self.DEFAULT_CATEGORIES]

    def get_log_level(self) -> str:
        """Log level name (default: 'INFO')."""
        return self._get(self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL).upper()
