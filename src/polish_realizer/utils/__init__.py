"""Utility modules for the Polish realizer."""

from polish_realizer.utils.file_handlers import (
    load_json,
    save_json,
    save_text,
    ensure_directory,
)
from polish_realizer.utils.logging_config import configure_logging

__all__ = [
    "load_json",
    "save_json",
    "save_text",
    "ensure_directory",
    "configure_logging",
]
