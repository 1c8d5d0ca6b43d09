import sys

from weighted_trie.cli import main

sys.exit(main())
