"""Morse translator built on the lookup tree."""

from .translator import MorseTranslator

__all__ = ["MorseTranslator"]
