# weighted_trie/utils/__init__.py
# helpers around the core trie: serialization, logging, config
