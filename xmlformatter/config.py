#!/usr/bin/env python3
"""
Application configuration, constants, and theme definitions.
Centralizes all magic numbers, strings, and configurable behavior.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List
from pathlib import Path

# ─── Version ───────────────────────────────────────────────
APP_NAME = "XML Formatter Pro"
APP_VERSION = "1.2.0"
APP_TITLE = f"{APP_NAME} v{APP_VERSION}"

# ─── Paths ─────────────────────────────────────────────────
APP_DIR = Path(__file__).parent.resolve()
CONFIG_FILE = APP_DIR / "formatter_config.json"
LOG_FILE = APP_DIR / "formatter.log"
MAX_RECENT_FILES = 20
DEFAULT_EXPORT_NAME = "formatted.xml"

# ─── Logging ───────────────────────────────────────────────
LOGGER_NAME = "xmlformatter"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL = logging.INFO

# ─── Formatting ────────────────────────────────────────────
INDENT_CHOICES = (2, 4, 8)
DEFAULT_INDENT = 2

# ─── File handling ─────────────────────────────────────────
MAX_FILE_SIZE_MB = 50
SUPPORTED_EXTENSIONS = {".xml"}
ENCODING_FALLBACKS = ["utf-8", "utf-8-sig", "latin-1", "cp1252"]
STDIN_SOURCE = "<stdin>"

# ─── User-facing messages ──────────────────────────────────
MESSAGES: Dict[str, str] = {
    "blank_input": "Please enter XML content",
    "not_well_formed": "XML is not well-formed",
    "valid": "XML is well-formed",
    "formatted": "Formatted successfully",
    "minified": "Minified successfully",
    "nothing_to_copy": "Nothing to copy",
    "copied": "Copied to clipboard",
    "nothing_to_save": "Nothing to download",
    "saved": "Saved to {path}",
    "save_failed": "Cannot save file: {reason}",
    "cleared": "Cleared.",
}


# ─── Theme ─────────────────────────────────────────────────
@dataclass
class ThemeColors:
    """Color palette for a theme."""
    bg: str = "#ffffff"
    fg: str = "#212121"
    accent: str = "#1976d2"
    error: str = "#d32f2f"
    success: str = "#388e3c"
    surface: str = "#f5f5f5"
    editor_bg: str = "#fafafa"
    err_banner: str = "#ffebee"
    tag: str = "#1565c0"
    attr_name: str = "#6a1b9a"
    attr_value: str = "#2e7d32"
    comment: str = "#9e9e9e"
    entity: str = "#ef6c00"


LIGHT_THEME = ThemeColors()
DARK_THEME = ThemeColors(
    bg="#1e1e1e",
    fg="#e0e0e0",
    accent="#64b5f6",
    error="#ef5350",
    success="#66bb6a",
    surface="#2d2d2d",
    editor_bg="#1e1e1e",
    err_banner="#4e1e1e",
    tag="#569cd6",
    attr_name="#9cdcfe",
    attr_value="#ce9178",
    comment="#6a9955",
    entity="#d7ba7d",
)


# ─── Application Config (persisted) ───────────────────────
@dataclass
class AppConfig:
    """Persisted application configuration."""
    theme: str = "System"
    indent_width: int = DEFAULT_INDENT
    last_directory: str = ""
    recent_files: List[str] = field(default_factory=list)
    window_geometry: str = ""
    debug_mode: bool = False
    max_recent_files: int = MAX_RECENT_FILES

    def save(self, path: Path = CONFIG_FILE) -> None:
        """Save config to disk."""
        try:
            data = {
                "theme": self.theme,
                "indent_width": self.indent_width,
                "last_directory": self.last_directory,
                "recent_files": self.recent_files[:self.max_recent_files],
                "window_geometry": self.window_geometry,
                "debug_mode": self.debug_mode,
            }
            Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")
        except Exception as e:
            logging.getLogger(__name__).warning("Failed to save config: %s", e)

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "AppConfig":
        """Load config from disk, returning defaults on failure."""
        try:
            path = Path(path)
            if path.exists():
                data = json.loads(path.read_text(encoding="utf-8"))
                config = cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
                if not isinstance(config.indent_width, int) or config.indent_width < 0:
                    config.indent_width = DEFAULT_INDENT
                return config
        except Exception as e:
            logging.getLogger(__name__).warning("Failed to load config: %s", e)
        return cls()

    def add_recent_file(self, path: str) -> None:
        """Add a file to the recent files list."""
        path = str(Path(path).resolve())
        if path in self.recent_files:
            self.recent_files.remove(path)
        self.recent_files.insert(0, path)
        self.recent_files = self.recent_files[:self.max_recent_files]
