"""Realisation pipeline and text formatting."""

from polish_realizer.realiser.formatter import NumberedPrefix, TextFormatter
from polish_realizer.realiser.realiser import Realiser, RealiserConfig

__all__ = ["NumberedPrefix", "TextFormatter", "Realiser", "RealiserConfig"]
