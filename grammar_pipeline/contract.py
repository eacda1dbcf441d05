"""Data objects shared by the parsing adapter, the rules and the report."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

from grammar_pipeline.constants import TAM_CATEGORIES


@dataclass(frozen=True)
class TaggedToken:
    text: str
    tag: str
    index: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.text}/{self.tag}"

    @property
    def match_key(self) -> Tuple[str, str]:
        return (self.text.lower(), self.tag.lower())

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "tag": self.tag, "index": self.index}


ROOT_TOKEN = TaggedToken("ROOT", "", 0)


@dataclass(frozen=True)
class TypedDependency:
    relation: str
    governor: TaggedToken
    dependent: TaggedToken

    def __str__(self) -> str:
        return f"{self.relation}({self.governor}, {self.dependent})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "relation": self.relation,
            "governor": self.governor.to_dict(),
            "dependent": self.dependent.to_dict(),
        }


@dataclass
class FeatureCounts:
    comparative_adjective: int = 0
    superlative_adjective: int = 0
    comparative_adverb: int = 0
    superlative_adverb: int = 0
    existential: int = 0
    modal: int = 0

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, 0)

    def to_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _empty_matches() -> Dict[str, List[TypedDependency]]:
    return {category: [] for category in TAM_CATEGORIES}


@dataclass
class ClassificationResult:
    matches: Dict[str, List[TypedDependency]] = field(default_factory=_empty_matches)

    def __getitem__(self, category: str) -> List[TypedDependency]:
        return self.matches[category]

    def counts(self) -> Dict[str, int]:
        return {category: len(edges) for category, edges in self.matches.items()}

    def merge(self, other: "ClassificationResult") -> None:
        for category, edges in other.matches.items():
            self.matches.setdefault(category, []).extend(edges)


@dataclass
class GrammarReport:
    features: FeatureCounts = field(default_factory=FeatureCounts)
    imperatives: List[str] = field(default_factory=list)
    tam: ClassificationResult = field(default_factory=ClassificationResult)
    sentence_count: int = 0
    readability: Optional[Dict[str, Any]] = None

    def to_dict(self, include_edges: bool = False) -> Dict[str, Any]:
        tam: Dict[str, Any] = {}
        for category, edges in self.tam.matches.items():
            entry: Dict[str, Any] = {"count": len(edges)}
            if include_edges:
                entry["edges"] = [edge.to_dict() for edge in edges]
            tam[category] = entry
        out: Dict[str, Any] = {
            "sentence_count": self.sentence_count,
            "features": self.features.to_dict(),
            "imperatives": list(self.imperatives),
            "tam": tam,
        }
        if self.readability is not None:
            out["readability"] = dict(self.readability)
        return out
