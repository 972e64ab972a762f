"""
Attribute-based Adamic-Adar similarity.

Two people are similar when they share attributes, and a shared attribute
says more the rarer it is: each shared "category:value" token adds
1 / log10(frequency), frequency being how many nodes in the population
carry the token.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from smallworld.common.config import SCORE_DECIMALS, UNIQUE_ATTRIBUTE_FREQUENCY
from smallworld.model.types import AttributeNode


@dataclass(frozen=True)
class SharedAttribute:
    name: str
    frequency: int
    contribution: float


@dataclass(frozen=True)
class SimilarityResult:
    score: float
    shared_attributes: List[SharedAttribute] = field(default_factory=list)


def attribute_frequencies(all_nodes: Sequence[AttributeNode]) -> Counter:
    """Count, for each "category:value" token, the nodes carrying it."""
    freq: Counter = Counter()
    for node in all_nodes:
        freq.update(node.attribute_tokens())
    return freq


def similarity_from_frequencies(
    source: Optional[AttributeNode],
    target: Optional[AttributeNode],
    frequencies: Mapping[str, int],
) -> SimilarityResult:
    """
    Score `source` against `target` with token frequencies already counted
    (see attribute_frequencies). Lets callers scoring many pairs of the
    same population count once.
    """
    if source is None or target is None or source.id == target.id:
        return SimilarityResult(score=0.0)

    target_tokens = set(target.attribute_tokens())
    shared = [a for a in source.attribute_tokens() if a in target_tokens]
    if not shared:
        return SimilarityResult(score=0.0)

    score = 0.0
    details: List[SharedAttribute] = []
    for name in shared:
        freq = frequencies.get(name, 0)
        if freq > 1:
            contribution = 1 / math.log10(freq)
        else:
            contribution = 1 / math.log10(UNIQUE_ATTRIBUTE_FREQUENCY)
        score += contribution
        details.append(SharedAttribute(name, freq, contribution))

    return SimilarityResult(score=round(score, SCORE_DECIMALS), shared_attributes=details)


def calculate_similarity(
    source: Optional[AttributeNode],
    target: Optional[AttributeNode],
    all_nodes: Sequence[AttributeNode],
) -> SimilarityResult:
    """
    Similarity of `source` and `target` against the population `all_nodes`.

    A token with frequency <= 1 is scored 1 / log10(1.1) instead of dividing
    by zero. Missing nodes, or a node compared with itself, score 0.
    """
    if source is None or target is None or source.id == target.id:
        return SimilarityResult(score=0.0)
    return similarity_from_frequencies(source, target, attribute_frequencies(all_nodes))
