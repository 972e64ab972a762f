import math

import pytest

from smallworld.common.errors import UnknownNodeReference
from smallworld.generators.random_graph import generate_random_graph
from smallworld.link_prediction.adamic_adar import calculate_adamic_adar
from smallworld.link_prediction.attribute_similarity import (
    attribute_frequencies,
    calculate_similarity,
    similarity_from_frequencies,
)
from smallworld.model.types import AttributeNode, Edge, PlainNode


# === TOPOLOGICAL ADAMIC-ADAR ===

def test_adamic_adar_reference_example(abcd):
    nodes, edges = abcd
    result = calculate_adamic_adar(nodes, edges, "A", "B")
    # common neighbour C has degree 3: 1 / log10(3)
    assert result.score == pytest.approx(2.0959, abs=1e-4)
    assert [(n.id, n.degree) for n in result.neighbors] == [("C", 3)]
    assert result.neighbors[0].contribution == pytest.approx(1 / math.log10(3))


def test_adamic_adar_degree_two_neighbour():
    nodes = [PlainNode(n) for n in "ABC"]
    result = calculate_adamic_adar(nodes, [Edge("A", "C"), Edge("B", "C")], "A", "B")
    assert result.score == 3.3219


def test_adamic_adar_sums_common_neighbours():
    nodes = [PlainNode(n) for n in "ABCDE"]
    edges = [Edge("A", "C"), Edge("B", "C"), Edge("A", "D"), Edge("B", "D"), Edge("D", "E")]
    result = calculate_adamic_adar(nodes, edges, "A", "B")
    expected = 1 / math.log10(2) + 1 / math.log10(3)
    assert result.score == round(expected, 4)
    assert [n.id for n in result.neighbors] == ["C", "D"]


def test_adamic_adar_no_common_neighbours(line4):
    nodes, edges = line4
    result = calculate_adamic_adar(nodes, edges, "A", "D")
    assert result.score == 0
    assert result.neighbors == []


def test_adamic_adar_same_node(abcd):
    nodes, edges = abcd
    result = calculate_adamic_adar(nodes, edges, "C", "C")
    assert result.score == 0
    assert result.neighbors == []


def test_adamic_adar_is_symmetric(rng):
    g = generate_random_graph(12, 0.35, rng=rng)
    ids = g.node_ids()
    for a in ids:
        for b in ids:
            assert calculate_adamic_adar(g.nodes, g.edges, a, b) == calculate_adamic_adar(g.nodes, g.edges, b, a)


def test_adamic_adar_accepts_raw_tuples(abcd):
    nodes, _ = abcd
    result = calculate_adamic_adar(nodes, [("A", "C"), ("B", "C"), ("C", "D")], "A", "B")
    assert result.score == pytest.approx(2.0959, abs=1e-4)


def test_adamic_adar_unknown_node(abcd):
    nodes, edges = abcd
    with pytest.raises(UnknownNodeReference):
        calculate_adamic_adar(nodes, edges, "A", "Q")


def test_adamic_adar_unknown_edge_endpoint(abcd):
    nodes, edges = abcd
    with pytest.raises(UnknownNodeReference):
        calculate_adamic_adar(nodes, edges + [Edge("A", "Q")], "A", "B")


# === ATTRIBUTE SIMILARITY ===

@pytest.fixture
def people():
    alice = AttributeNode("alice", {"Interests": ("Music",), "Location": ("Paris",)})
    bob = AttributeNode("bob", {"Interests": ("Music",), "Location": ("Paris",)})
    carol = AttributeNode("carol", {"Interests": ("Music", "Art"), "Location": ("Tokyo",)})
    return alice, bob, carol


def test_attribute_frequencies(people):
    freq = attribute_frequencies(people)
    assert freq["Interests:Music"] == 3
    assert freq["Location:Paris"] == 2
    assert freq["Interests:Art"] == 1


def test_similarity_weights_rare_attributes_higher(people):
    alice, bob, carol = people
    result = calculate_similarity(alice, bob, people)
    expected = 1 / math.log10(3) + 1 / math.log10(2)
    assert result.score == round(expected, 4)
    assert [(s.name, s.frequency) for s in result.shared_attributes] == [
        ("Interests:Music", 3),
        ("Location:Paris", 2),
    ]
    assert result.shared_attributes[1].contribution > result.shared_attributes[0].contribution


def test_similarity_unique_attribute_fallback(people):
    alice, bob, carol = people
    # bob is outside the population, so Paris is seen only once
    result = calculate_similarity(alice, bob, [alice, carol])
    expected = 1 / math.log10(2) + 1 / math.log10(1.1)
    assert result.score == pytest.approx(round(expected, 4))
    assert result.shared_attributes[1].frequency == 1


def test_similarity_is_symmetric(people):
    alice, bob, carol = people
    assert calculate_similarity(alice, carol, people).score == calculate_similarity(carol, alice, people).score


def test_similarity_degenerate_inputs(people):
    alice, bob, carol = people
    assert calculate_similarity(alice, alice, people).score == 0
    assert calculate_similarity(None, bob, people).score == 0
    assert calculate_similarity(bob, None, people).shared_attributes == []


def test_similarity_without_shared_attributes(people):
    alice, _, _ = people
    dave = AttributeNode("dave", {"Interests": ("Gaming",), "Location": ("Seoul",)})
    result = calculate_similarity(alice, dave, list(people) + [dave])
    assert result.score == 0
    assert result.shared_attributes == []


def test_adamic_adar_same_unknown_node_raises():
    with pytest.raises(UnknownNodeReference):
        calculate_adamic_adar([PlainNode("A")], [], "ghost", "ghost")


def test_adamic_adar_same_node_still_checks_edges(abcd):
    nodes, edges = abcd
    with pytest.raises(UnknownNodeReference):
        calculate_adamic_adar(nodes, edges + [Edge("C", "Q")], "C", "C")


def test_similarity_from_precounted_frequencies(people):
    alice, bob, carol = people
    freq = attribute_frequencies(people)
    for a in people:
        for b in people:
            assert similarity_from_frequencies(a, b, freq) == calculate_similarity(a, b, people)
