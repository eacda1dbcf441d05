"""Imperative candidates from a tagged sentence."""

from __future__ import annotations

from typing import List, Sequence

from grammar_pipeline.constants import MD, QUESTION_SENTINEL, TO, VB, VBP
from grammar_pipeline.contract import TaggedToken


def find_imperatives(tokens: Sequence[TaggedToken]) -> List[str]:
    """Return base-form verbs that look like imperatives, left to right.

    Accuracy follows the tagger and degrades on complex sentences.
    """
    if not tokens:
        return []
    # Compares against the word/tag rendering of the last token; real
    # taggers may not render a question mark this way.
    if str(tokens[-1]) == QUESTION_SENTINEL:
        return []

    out: List[str] = []
    if tokens[0].tag in {VB, VBP}:
        out.append(tokens[0].text)
    for prev, token in zip(tokens, tokens[1:]):
        if token.tag == VB and prev.tag not in {TO, MD}:
            out.append(token.text)
    return out
