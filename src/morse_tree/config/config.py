"""Configuration module for the Morse tree translator."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

# Canonical codes are always written with "." and "-"; SymbolConfig controls rendering.
INTERNATIONAL_MORSE: dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "'": ".----.", "!": "-.-.--",
    "/": "-..-.", "(": "-.--.", ")": "-.--.-", "&": ".-...", ":": "---...",
    ";": "-.-.-.", "=": "-...-", "+": ".-.-.", "-": "-....-", "_": "..--.-",
    '"': ".-..-.", "@": ".--.-.",
}


@dataclass(frozen=True)
class SymbolConfig:
    """How Morse text is rendered and parsed.

    Attributes
    ----------
        dot: str
            Character written for a dot.
        dash: str
            Character written for a dash.
        letter_gap: str
            Separator between letters of a word.
        word_gap: str
            Separator between words.

    Raises
    ------
        ValueError: If dot/dash are not distinct single non-whitespace characters, or if the gaps
            are empty, equal, or contain a dot or dash symbol.
    """

    dot: str = "."
    dash: str = "-"
    letter_gap: str = " "
    word_gap: str = " / "

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if len(self.dot) != 1 or len(self.dash) != 1:
            msg = f"dot and dash must be single characters, got ({self.dot!r}, {self.dash!r})"
            raise ValueError(msg)
        if self.dot.isspace() or self.dash.isspace():
            msg = f"dot and dash must not be whitespace, got ({self.dot!r}, {self.dash!r})"
            raise ValueError(msg)
        if self.dot == self.dash:
            msg = f"dot and dash must differ, got {self.dot!r} for both"
            raise ValueError(msg)
        if not self.letter_gap or not self.word_gap:
            msg = "letter_gap and word_gap must be non-empty"
            raise ValueError(msg)
        if self.letter_gap == self.word_gap:
            msg = f"letter_gap and word_gap must differ, got {self.letter_gap!r} for both"
            raise ValueError(msg)
        for gap in (self.letter_gap, self.word_gap):
            if self.dot in gap or self.dash in gap:
                msg = f"gap {gap!r} must not contain the dot or dash symbol"
                raise ValueError(msg)


@dataclass(frozen=True)
class AlphabetConfig:
    """Character to code table used to build the tree.

    Attributes
    ----------
        codes: dict[str, str]
            Maps each character to its code written with "." and "-".
        max_depth: int
            Longest code allowed (tree height).

    Raises
    ------
        ValueError: If a key is not a single character, a code is empty, uses
            other symbols, exceeds max_depth, or is assigned twice.
    """

    codes: dict[str, str] = field(default_factory=lambda: dict(INTERNATIONAL_MORSE))
    max_depth: int = 7

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if self.max_depth <= 0:
            msg = f"max_depth must be > 0, got {self.max_depth}"
            raise ValueError(msg)
        seen: dict[str, str] = {}
        for char, code in self.codes.items():
            if not isinstance(char, str) or len(char) != 1:
                msg = f"alphabet keys must be single characters, got {char!r}"
                raise ValueError(msg)
            if not isinstance(code, str) or not code or set(code) - {".", "-"}:
                msg = f"code for {char!r} must be a non-empty string of '.' and '-', got {code!r}"
                raise ValueError(msg)
            if len(code) > self.max_depth:
                msg = f"code for {char!r} is longer than max_depth {self.max_depth}: {code!r}"
                raise ValueError(msg)
            if code in seen:
                msg = f"code {code!r} assigned to both {seen[code]!r} and {char!r}"
                raise ValueError(msg)
            seen[code] = char


@dataclass(frozen=True)
class TranslatorConfig:
    """Handling of untranslatable input.

    Attributes
    ----------
        strict: bool
            Raise on unknown characters or codes.
        unknown: str
            Emitted for unknown codes when decoding in lenient mode.
    """

    strict: bool = True
    unknown: str = "?"

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if len(self.unknown) != 1:
            msg = f"unknown must be a single character, got {self.unknown!r}"
            raise ValueError(msg)


@dataclass(frozen=True)
class Config:
    """
    Top-level configuration for the Morse translator.

    Groups
    ----------
        symbols: SymbolConfig
            Rendering of dots, dashes and gaps.
        alphabet: AlphabetConfig
            Code table the tree is built from.
        translator: TranslatorConfig
            Strictness of encode/decode.
        verbose: bool
            Flag to enable verbose output.

    Raises
    ------
        ValueError: If any of the sub-configs contain invalid values.
    """

    symbols: SymbolConfig = field(default_factory=SymbolConfig)
    alphabet: AlphabetConfig = field(default_factory=AlphabetConfig)
    translator: TranslatorConfig = field(default_factory=TranslatorConfig)
    verbose: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Recursively convert to plain dict (for logging, serialization)."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Dump entire config as a YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build Config by unpacking each sub-dict into its sub-config."""
        alphabet = dict(data.get("alphabet", {}))
        # YAML loads unquoted digit keys as int
        if isinstance(alphabet.get("codes"), dict):
            alphabet["codes"] = {str(k): v for k, v in alphabet["codes"].items()}
        return cls(
            symbols=SymbolConfig(**data.get("symbols", {})),
            alphabet=AlphabetConfig(**alphabet),
            translator=TranslatorConfig(**data.get("translator", {})),
            verbose=data.get("verbose", False),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load a YAML file and return a Config."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})
