"""Unit tests for Morse translator configuration."""

import pytest

from morse_tree.config import (
    INTERNATIONAL_MORSE,
    AlphabetConfig,
    Config,
    SymbolConfig,
    TranslatorConfig,
)


def test_defaults():
    """Default config uses the international alphabet and strict mode."""
    config = Config()
    assert config.alphabet.codes == INTERNATIONAL_MORSE
    assert config.symbols.dot == "."
    assert config.symbols.dash == "-"
    assert config.translator.strict
    assert not config.verbose


@pytest.mark.parametrize("kwargs", [
    {"dot": ".."},             # not a single character
    {"dot": "-", "dash": "-"},  # same symbol
    {"dot": "\t"},             # whitespace dot
    {"dash": "\n"},            # whitespace dash
    {"letter_gap": ""},        # empty gap
    {"word_gap": " "},         # equal to letter_gap
    {"word_gap": " - "},       # contains dash
])
def test_symbol_config_rejects_invalid(kwargs):
    """Invalid symbol settings raise ValueError."""
    with pytest.raises(ValueError):
        SymbolConfig(**kwargs)


@pytest.mark.parametrize("codes", [
    {"AB": ".-"},               # multi-char key
    {"A": ""},                  # empty code
    {"A": ".x"},                # foreign symbol
    {"A": ".-", "B": ".-"},     # duplicate code
    {"A": "........"},          # longer than max_depth
    {1: ".----"},               # non-string key
    {"A": None},                # non-string code
])
def test_alphabet_config_rejects_invalid(codes):
    """Invalid code tables raise ValueError."""
    with pytest.raises(ValueError):
        AlphabetConfig(codes=codes)


def test_alphabet_config_rejects_non_positive_depth():
    with pytest.raises(ValueError):
        AlphabetConfig(max_depth=0)


def test_translator_config_rejects_long_unknown():
    with pytest.raises(ValueError):
        TranslatorConfig(unknown="??")


def test_from_dict_partial():
    """Missing groups fall back to defaults."""
    config = Config.from_dict({"translator": {"strict": False}, "verbose": True})
    assert not config.translator.strict
    assert config.verbose
    assert config.symbols == SymbolConfig()


def test_yaml_roundtrip(tmp_path):
    """A dumped config loads back equal."""
    config = Config(
        symbols=SymbolConfig(dot="*", dash="_"),
        alphabet=AlphabetConfig(codes={"E": ".", "T": "-"}),
    )
    path = tmp_path / "config.yaml"
    path.write_text(config.to_yaml())
    assert Config.from_yaml(path) == config


def test_from_yaml_empty_file(tmp_path):
    """An empty YAML file yields the default config."""
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert Config.from_yaml(path) == Config()


def test_from_yaml_digit_keys(tmp_path):
    """Unquoted digit keys in YAML are read as characters."""
    path = tmp_path / "digits.yaml"
    path.write_text('alphabet:\n  codes:\n    E: "."\n    1: ".----"\n')
    config = Config.from_yaml(path)
    assert config.alphabet.codes == {"E": ".", "1": ".----"}
