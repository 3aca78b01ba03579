"""Shared fixtures and input generators for the editorial tests."""
from __future__ import annotations

import random

import pytest

from editorial_tools.prefix_matching import KMPMatching, NaiveMatching
from editorial_tools.tree_independent_set import BruteForceIndependentSet, TreeIndependentSet

SEED = 42


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def kmp() -> KMPMatching:
    return KMPMatching()


@pytest.fixture
def naive() -> NaiveMatching:
    return NaiveMatching()


@pytest.fixture
def solver() -> TreeIndependentSet:
    return TreeIndependentSet()


@pytest.fixture
def brute() -> BruteForceIndependentSet:
    return BruteForceIndependentSet()


def random_string(rng: random.Random, length: int, alphabet: str = "ab") -> str:
    """Small alphabets make repeated borders and overlaps likely."""
    return "".join(rng.choice(alphabet) for _ in range(length))


def random_tree_edges(rng: random.Random, n: int) -> list[tuple[int, int]]:
    """Attach each node 2..n to a random earlier node, then relabel."""
    labels = list(range(1, n + 1))
    rng.shuffle(labels)
    edges = []
    for i in range(1, n):
        j = rng.randrange(i)
        edges.append((labels[i], labels[j]))
    rng.shuffle(edges)
    return edges


def path_edges(n: int) -> list[tuple[int, int]]:
    return [(i, i + 1) for i in range(1, n)]
