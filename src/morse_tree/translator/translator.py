"""Encode text to Morse code and decode it back by walking the lookup tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from morse_tree.alphabet import build_tree
from morse_tree.utils import iter_codes

if TYPE_CHECKING:
    from morse_tree.binary_tree import Node, Tree
    from morse_tree.config import Config


class MorseTranslator:
    """Translate between plain text and Morse code using a Morse lookup tree.

    The translator owns its tree and destroys it on ``close()``.
    """

    def __init__(self, config: Config, tree: Tree | None = None) -> None:
        """
        Initialize with global config and an optional pre-built tree.

        Args
        ------
            config (Config): Configuration object with parameters.
            tree (Tree, optional): Lookup tree to take ownership of. Built from
                ``config.alphabet`` when omitted.
        """
        self.config = config
        self._tree: Tree | None = tree if tree is not None else build_tree(config)
        # Reverse lookup, derived once from the tree itself; a valued root has no code
        self._codes: dict[str, str] = {
            value: code for code, value in iter_codes(self._tree.root) if code
        }
        symbols = config.symbols
        self._render = str.maketrans(".-", symbols.dot + symbols.dash)

    def __enter__(self) -> MorseTranslator:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._tree is None

    def _check_open(self) -> None:
        if self._tree is None:
            msg = "Translator is closed"
            raise RuntimeError(msg)

    @property
    def tree(self) -> Tree:
        self._check_open()
        return self._tree

    def close(self) -> int:
        """Destroy the owned tree. Returns the number of released nodes (0 if already closed)."""
        if self._tree is None:
            return 0
        tree, self._tree = self._tree, None
        self._codes = {}
        released = tree.destroy()
        if self.config.verbose:
            print(f"Released {released} nodes")
        return released

    def _lookup_code(self, char: str) -> str | None:
        code = self._codes.get(char)
        if code is None:
            code = self._codes.get(char.upper())
        return code

    def encode(self, text: str) -> str:
        """
        Encode ``text`` as Morse code.

        Words are split on whitespace and joined with ``word_gap``; letters within
        a word are joined with ``letter_gap``. Lookup is case-insensitive.

        Args
        -----
            text (str): Plain text to encode.

        Returns
        -------
            str: Morse rendering using the configured symbols.

        Raises
        ------
            ValueError: In strict mode, if a character has no code.
            RuntimeError: If the translator is closed.
        """
        self._check_open()
        symbols = self.config.symbols
        words: list[str] = []
        letter_count = 0
        for word in text.split():
            letters: list[str] = []
            for char in word:
                code = self._lookup_code(char)
                if code is None:
                    if self.config.translator.strict:
                        msg = f"No Morse code for character {char!r}"
                        raise ValueError(msg)
                    continue
                letters.append(code.translate(self._render))
            if letters:
                words.append(symbols.letter_gap.join(letters))
                letter_count += len(letters)
        if self.config.verbose:
            print(f"Encoded {letter_count} letters in {len(words)} words")
        return symbols.word_gap.join(words)

    def _walk(self, letter: str) -> Node | None:
        """Follow ``letter`` from the root, one branch per symbol."""
        symbols = self.config.symbols
        node = self.tree.root
        for symbol in letter:
            if node is None:
                break
            if symbol == symbols.dot:
                node = node.dot
            elif symbol == symbols.dash:
                node = node.dash
            else:
                return None
        return node

    def decode(self, morse: str) -> str:
        """
        Decode Morse code back to text.

        Args
        -----
            morse (str): Morse text using the configured symbols and gaps.

        Returns
        -------
            str: Decoded text, words separated by a single space.

        Raises
        ------
            ValueError: In strict mode, if a letter does not lead to a character.
            RuntimeError: If the translator is closed.
        """
        self._check_open()
        symbols = self.config.symbols
        words: list[str] = []
        letter_count = 0
        for word in morse.split(symbols.word_gap):
            chars: list[str] = []
            for letter in word.split(symbols.letter_gap):
                letter = letter.strip()
                if not letter:
                    continue
                node = self._walk(letter)
                if node is None or node.value is None:
                    if self.config.translator.strict:
                        msg = f"Unknown Morse code {letter!r}"
                        raise ValueError(msg)
                    chars.append(self.config.translator.unknown)
                else:
                    chars.append(node.value)
            if chars:
                words.append("".join(chars))
                letter_count += len(chars)
        if self.config.verbose:
            print(f"Decoded {letter_count} letters in {len(words)} words")
        return " ".join(words)
