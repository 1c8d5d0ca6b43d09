# tests/conftest.py
import logging

import pytest

from weighted_trie import Trie

SEED = [
    ("network", 8),
    ("networking", 6),
    ("neural", 5),
    ("neuralnet", 4),
    ("node", 7),
    ("nodejs", 6),
    ("python", 10),
    ("pytest", 5),
    ("query", 6),
    ("queue", 4),
]


@pytest.fixture
def trie():
    return Trie()


@pytest.fixture
def seeded():
    t = Trie()
    for word, freq in SEED:
        t.insert(word, freq)
    return t


@pytest.fixture
def seed_words():
    return list(SEED)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    # configure_logging() swaps handlers on the package logger, undo it per test
    logger = logging.getLogger("weighted_trie")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for handler in list(logger.handlers):
        if handler not in saved[0]:
            logger.removeHandler(handler)
            handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
