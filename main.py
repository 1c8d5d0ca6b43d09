# main.py - run the weighted trie demo from a source checkout

import sys

from weighted_trie.cli import main

if __name__ == "__main__":
    sys.exit(main())
