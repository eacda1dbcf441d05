"""Structural validation of grammar reports before they are written out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from grammar_pipeline.constants import LEXICAL_FEATURE_TAGS, TAM_CATEGORIES

EDGE_FIELDS = ("relation", "governor", "dependent")
TOKEN_FIELDS = ("text", "tag", "index")


@dataclass
class ValidationErrorItem:
    path: str
    message: str


@dataclass
class ValidationResult:
    ok: bool
    errors: List[ValidationErrorItem]


def _expect(condition: bool, errors: List[ValidationErrorItem], path: str, message: str) -> None:
    if not condition:
        errors.append(ValidationErrorItem(path=path, message=message))


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _validate_features(features: Any, path: str, errors: List[ValidationErrorItem]) -> None:
    _expect(isinstance(features, dict), errors, path, "features must be an object")
    if not isinstance(features, dict):
        return
    for name in LEXICAL_FEATURE_TAGS.values():
        _expect(name in features, errors, f"{path}.{name}", "missing feature counter")
        if name in features:
            _expect(_is_count(features[name]), errors, f"{path}.{name}", "counter must be non-negative integer")
    extra = set(features) - set(LEXICAL_FEATURE_TAGS.values())
    _expect(not extra, errors, path, f"unknown feature counters: {sorted(extra)}")


def _validate_token(token: Any, path: str, errors: List[ValidationErrorItem]) -> None:
    _expect(isinstance(token, dict), errors, path, "token must be an object")
    if not isinstance(token, dict):
        return
    for field in TOKEN_FIELDS:
        _expect(field in token, errors, f"{path}.{field}", "missing token field")
    _expect(isinstance(token.get("text"), str), errors, f"{path}.text", "text must be string")
    _expect(isinstance(token.get("tag"), str), errors, f"{path}.tag", "tag must be string")
    index = token.get("index")
    _expect(index is None or _is_count(index), errors, f"{path}.index", "index must be non-negative integer or null")


def _validate_edges(edges: Any, path: str, errors: List[ValidationErrorItem]) -> None:
    _expect(isinstance(edges, list), errors, path, "edges must be a list")
    if not isinstance(edges, list):
        return
    for i, edge in enumerate(edges):
        edge_path = f"{path}[{i}]"
        _expect(isinstance(edge, dict), errors, edge_path, "edge must be an object")
        if not isinstance(edge, dict):
            continue
        for field in EDGE_FIELDS:
            _expect(field in edge, errors, f"{edge_path}.{field}", "missing edge field")
        _expect(isinstance(edge.get("relation"), str), errors, f"{edge_path}.relation", "relation must be string")
        for side in ("governor", "dependent"):
            if side in edge:
                _validate_token(edge[side], f"{edge_path}.{side}", errors)


def _validate_tam(tam: Any, path: str, errors: List[ValidationErrorItem]) -> None:
    _expect(isinstance(tam, dict), errors, path, "tam must be an object")
    if not isinstance(tam, dict):
        return
    for category in TAM_CATEGORIES:
        entry = tam.get(category)
        entry_path = f"{path}.{category}"
        _expect(isinstance(entry, dict), errors, entry_path, "missing tense/aspect category")
        if not isinstance(entry, dict):
            continue
        _expect(_is_count(entry.get("count")), errors, f"{entry_path}.count", "count must be non-negative integer")
        if "edges" in entry:
            _validate_edges(entry["edges"], f"{entry_path}.edges", errors)
            if isinstance(entry["edges"], list) and _is_count(entry.get("count")):
                _expect(
                    len(entry["edges"]) == entry["count"],
                    errors,
                    f"{entry_path}.count",
                    "count must equal number of edges",
                )


def _validate_readability(readability: Any, path: str, errors: List[ValidationErrorItem]) -> None:
    _expect(isinstance(readability, dict), errors, path, "readability must be an object")
    if not isinstance(readability, dict):
        return
    for field in ("complexity", "explanation", "label"):
        _expect(isinstance(readability.get(field), str), errors, f"{path}.{field}", f"{field} must be string")
    _expect(
        isinstance(readability.get("score"), (int, float)),
        errors,
        f"{path}.score",
        "score must be a number",
    )


def validate_report(report: Dict[str, Any]) -> ValidationResult:
    errors: List[ValidationErrorItem] = []
    _expect(isinstance(report, dict), errors, "$", "report must be an object")
    if not isinstance(report, dict):
        return ValidationResult(ok=False, errors=errors)

    _expect(_is_count(report.get("sentence_count")), errors, "$.sentence_count", "sentence_count must be non-negative integer")
    _validate_features(report.get("features"), "$.features", errors)

    imperatives = report.get("imperatives")
    _expect(isinstance(imperatives, list), errors, "$.imperatives", "imperatives must be a list")
    if isinstance(imperatives, list):
        for i, item in enumerate(imperatives):
            _expect(isinstance(item, str), errors, f"$.imperatives[{i}]", "imperative must be string")

    _validate_tam(report.get("tam"), "$.tam", errors)

    if "readability" in report:
        _validate_readability(report["readability"], "$.readability", errors)

    return ValidationResult(ok=not errors, errors=errors)


def raise_if_invalid(result: ValidationResult) -> None:
    if result.ok:
        return
    details = "\n".join(f"- {e.path}: {e.message}" for e in result.errors)
    raise ValueError(f"Validation failed:\n{details}")
