"""Morse Translator Demo
This script builds the Morse lookup tree from a configuration, encodes a sample
sentence, decodes it back, and releases the tree.
"""

import sys

from morse_tree.config import Config
from morse_tree.translator import MorseTranslator
from morse_tree.utils import count_nodes, to_heap_array, tree_height

SAMPLE_TEXT = "SOS we need help"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    # Setup Configuration
    config = Config.from_yaml(args[0]) if args else Config()

    with MorseTranslator(config) as translator:
        root = translator.tree.root
        print(f"Tree: {count_nodes(root)} nodes, height {tree_height(root)}")
        heap = to_heap_array(root)
        print(f"Heap layout (first 15 slots): {list(heap[:15])}")

        encoded = translator.encode(SAMPLE_TEXT)
        print(f"Text:    {SAMPLE_TEXT}")
        print(f"Encoded: {encoded}")
        print(f"Decoded: {translator.decode(encoded)}")

        released = translator.close()
    print(f"Released {released} nodes")
    return 0


# --- Main Demo ---
if __name__ == "__main__":
    sys.exit(main())
