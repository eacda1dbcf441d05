"""Counts of lexicalized grammar forms read straight off the POS tags."""

from __future__ import annotations

from typing import Iterable, Optional

from grammar_pipeline.contract import FeatureCounts, TaggedToken


def count_features(tokens: Iterable[TaggedToken], counts: Optional[FeatureCounts] = None) -> FeatureCounts:
    """Accumulate comparative/superlative adjectives and adverbs, existential
    "there" and modals into ``counts`` (a fresh counter when omitted).

    Each check is independent; the tags are disjoint, so one token bumps at
    most one counter.
    """
    if counts is None:
        counts = FeatureCounts()
    for token in tokens:
        tag = token.tag
        if tag == "JJR":
            counts.comparative_adjective += 1
        if tag == "JJS":
            counts.superlative_adjective += 1
        if tag == "RBR":
            counts.comparative_adverb += 1
        if tag == "RBS":
            counts.superlative_adverb += 1
        if tag == "EX":
            counts.existential += 1
        if tag == "MD":
            counts.modal += 1
    return counts
