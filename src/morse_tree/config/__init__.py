from .config import (
    INTERNATIONAL_MORSE,
    AlphabetConfig,
    Config,
    SymbolConfig,
    TranslatorConfig,
)

__all__ = [
    "INTERNATIONAL_MORSE",
    "AlphabetConfig",
    "Config",
    "SymbolConfig",
    "TranslatorConfig",
]
