import random

import pytest

from smallworld.model.types import Edge, PlainNode


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def abcd():
    """A, B, C, D with C as hub: A-C, B-C, C-D."""
    nodes = [PlainNode("A"), PlainNode("B"), PlainNode("C"), PlainNode("D")]
    edges = [Edge("A", "C"), Edge("B", "C"), Edge("C", "D")]
    return nodes, edges


@pytest.fixture
def line4():
    """Path graph A - B - C - D."""
    nodes = [PlainNode("A"), PlainNode("B"), PlainNode("C"), PlainNode("D")]
    edges = [Edge("A", "B"), Edge("B", "C"), Edge("C", "D")]
    return nodes, edges
