# weighted_trie/cli/__init__.py
from .cli import CLI, SAMPLE_WORDS, build_parser, load_words, main

__all__ = ["CLI", "SAMPLE_WORDS", "build_parser", "load_words", "main"]
