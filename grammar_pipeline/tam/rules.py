"""Deterministic tense/aspect rules over typed dependency edges.

Each rule scans the edges of one sentence in order and returns the edges
that signal its construction. The rules only read what the parser produced,
so parser mistakes (passive voice read as Future Perfect, auxiliaries
labelled as copulas) pass straight through.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence

from grammar_pipeline.constants import (
    AUX,
    COP,
    FUTURE_CONTINUOUS,
    FUTURE_PERFECT,
    FUTURE_SIMPLE,
    NSUBJ,
    PAST_CONTINUOUS,
    PAST_PERFECT,
    PAST_SIMPLE,
    PRESENT_CONTINUOUS,
    PRESENT_PERFECT,
    PRESENT_PERFECT_CONTINUOUS,
    PRESENT_SIMPLE,
    ROOT,
    VB,
    VBD,
    VBG,
    VBN,
    VBP,
    VBZ,
)
from grammar_pipeline.contract import ClassificationResult, TaggedToken, TypedDependency

HAVE_PRESENT = {("have", "vbp"), ("has", "vbz")}
HAD_PAST = {("had", "vbd")}
PERFECT_CONTINUOUS_AUX = HAVE_PRESENT | {("been", "vbn")}
WILL = {("will", "md")}
FUTURE_CONTINUOUS_AUX = WILL | {("be", "vb")}
FUTURE_PERFECT_AUX = WILL | {("have", "vb"), ("have", "vbp")}

Rule = Callable[[Sequence[TypedDependency]], List[TypedDependency]]


def check_dependency(edges: Iterable[TypedDependency], governor: TaggedToken, tag: str) -> bool:
    """True unless ``governor`` also heads an ``aux`` whose dependent is tagged ``tag``."""
    for edge in edges:
        if edge.governor == governor and edge.relation == AUX and edge.dependent.tag == tag:
            return False
    return True


def _perfect_auxiliary(edge: TypedDependency) -> bool:
    # The VBN head is required on the copula branch only; an aux matches
    # under any head. Known source of false positives, left unbalanced.
    return edge.relation == AUX or (edge.relation == COP and edge.governor.tag == VBN)


def get_present_simple(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    out: List[TypedDependency] = []
    for edge in edges:
        if edge.relation in {COP, AUX} and edge.dependent.tag in {VBP, VBZ, VB}:
            out.append(edge)
        elif (
            edge.relation == NSUBJ
            and edge.governor.tag in {VBP, VBZ}
            and check_dependency(edges, edge.governor, VBD)
        ):
            out.append(edge)
    return out


def get_present_continuous(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    return [
        edge
        for edge in edges
        if edge.relation == AUX and edge.governor.tag == VBG and edge.dependent.tag in {VBP, VBZ}
    ]


def get_present_perfect(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    return [edge for edge in edges if _perfect_auxiliary(edge) and edge.dependent.match_key in HAVE_PRESENT]


def get_present_perfect_continuous(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    return [
        edge
        for edge in edges
        if edge.relation == AUX
        and edge.governor.tag == VBG
        and edge.dependent.match_key in PERFECT_CONTINUOUS_AUX
    ]


def get_past_continuous(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    return [
        edge
        for edge in edges
        if edge.relation == AUX and edge.governor.tag == VBG and edge.dependent.tag == VBD
    ]


def get_past_simple(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    return [
        edge
        for edge in edges
        if edge.dependent.tag == VBD and edge.relation in {AUX, NSUBJ, COP, ROOT}
    ]


def get_past_perfect(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    return [edge for edge in edges if _perfect_auxiliary(edge) and edge.dependent.match_key in HAD_PAST]


def get_future_simple(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    return [
        edge
        for edge in edges
        if edge.relation == AUX and edge.governor.tag == VB and edge.dependent.match_key in WILL
    ]


def get_future_continuous(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    return [
        edge
        for edge in edges
        if edge.relation == AUX
        and edge.governor.tag == VBG
        and edge.dependent.match_key in FUTURE_CONTINUOUS_AUX
    ]


def get_future_perfect(edges: Sequence[TypedDependency]) -> List[TypedDependency]:
    # Also fires on future passives ("I will be pushed").
    return [
        edge
        for edge in edges
        if edge.relation == AUX
        and edge.governor.tag == VBN
        and edge.dependent.match_key in FUTURE_PERFECT_AUX
    ]


TAM_RULES: Dict[str, Rule] = {
    PRESENT_SIMPLE: get_present_simple,
    PRESENT_CONTINUOUS: get_present_continuous,
    PRESENT_PERFECT: get_present_perfect,
    PRESENT_PERFECT_CONTINUOUS: get_present_perfect_continuous,
    PAST_SIMPLE: get_past_simple,
    PAST_CONTINUOUS: get_past_continuous,
    PAST_PERFECT: get_past_perfect,
    FUTURE_SIMPLE: get_future_simple,
    FUTURE_CONTINUOUS: get_future_continuous,
    FUTURE_PERFECT: get_future_perfect,
}


def classify(edges: Sequence[TypedDependency]) -> ClassificationResult:
    """Run every rule over one sentence's edges."""
    edges = list(edges)
    result = ClassificationResult()
    for category, rule in TAM_RULES.items():
        result.matches[category] = rule(edges)
    return result
