"""spaCy loading, tagging and dependency-parsing utilities."""

from __future__ import annotations

import logging
import os
import threading
from typing import Callable, Dict, List, Optional, Sequence

import spacy
from spacy.tokens import Doc

from grammar_pipeline.constants import DEFAULT_SPACY_MODEL, RELATION_SHORT_NAMES, SPACY_MODEL_ENV
from grammar_pipeline.contract import ROOT_TOKEN, TaggedToken, TypedDependency

logger = logging.getLogger(__name__)

PARSER_COMPONENTS = ("tok2vec", "transformer", "parser")


class ModelLoadError(RuntimeError):
    """The dependency-parsing model could not be located or loaded."""


def resolve_model_name(model_name: Optional[str] = None) -> str:
    name = (model_name or os.getenv(SPACY_MODEL_ENV, DEFAULT_SPACY_MODEL)).strip()
    return name or DEFAULT_SPACY_MODEL


def load_nlp(model_name: str = DEFAULT_SPACY_MODEL):
    try:
        nlp = spacy.load(model_name)
    except (OSError, ValueError) as exc:
        raise ModelLoadError(f"Cannot load spaCy model {model_name!r}: {exc}") from exc
    if "parser" not in nlp.pipe_names:
        raise ModelLoadError(f"spaCy model {model_name!r} has no dependency parser")
    logger.info("Loaded spaCy model %s (pipes: %s)", model_name, ", ".join(nlp.pipe_names))
    return nlp


class SharedNlpModel:
    """Lazily loads one spaCy pipeline and hands the same instance to every caller."""

    def __init__(self, model_name: Optional[str] = None, loader: Optional[Callable] = None) -> None:
        self.model_name = resolve_model_name(model_name)
        self._loader = loader or load_nlp
        self._nlp = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._nlp is not None

    def get(self):
        if self._nlp is None:
            with self._lock:
                if self._nlp is None:
                    self._nlp = self._loader(self.model_name)
        return self._nlp


_SHARED_MODELS: Dict[str, SharedNlpModel] = {}
_SHARED_MODELS_LOCK = threading.Lock()


def get_shared_model(model_name: Optional[str] = None) -> SharedNlpModel:
    name = resolve_model_name(model_name)
    with _SHARED_MODELS_LOCK:
        handle = _SHARED_MODELS.get(name)
        if handle is None:
            handle = SharedNlpModel(name)
            _SHARED_MODELS[name] = handle
    return handle


def tag_sentences(text: str, model: SharedNlpModel) -> List[List[TaggedToken]]:
    doc = model.get()(text)
    sentences: List[List[TaggedToken]] = []
    for sent in doc.sents:
        tokens: List[TaggedToken] = []
        for token in sent:
            if token.is_space:
                continue
            tokens.append(TaggedToken(token.text, token.tag_, len(tokens) + 1))
        if tokens:
            sentences.append(tokens)
    return sentences


def short_relation(label: str) -> str:
    rel = (label or "").strip().lower()
    return RELATION_SHORT_NAMES.get(rel, rel)


class DependencyParserAdapter:
    """Turns one tagged sentence into typed dependency edges."""

    def __init__(self, model: Optional[SharedNlpModel] = None) -> None:
        self.model = model or get_shared_model()

    def _run_parser(self, tokens: Sequence[TaggedToken]) -> Doc:
        nlp = self.model.get()
        doc = Doc(nlp.vocab, words=[t.text for t in tokens])
        for spacy_token, token in zip(doc, tokens):
            spacy_token.tag_ = token.tag
        for name, proc in nlp.pipeline:
            if name in PARSER_COMPONENTS:
                doc = proc(doc)
        return doc

    def parse(self, tokens: Sequence[TaggedToken]) -> List[TypedDependency]:
        if not tokens:
            return []
        indexed = [TaggedToken(t.text, t.tag, i + 1) for i, t in enumerate(tokens)]
        doc = self._run_parser(indexed)

        edges: List[TypedDependency] = []
        for spacy_token in doc:
            dependent = indexed[spacy_token.i]
            if spacy_token.head.i == spacy_token.i:
                edges.append(TypedDependency("root", ROOT_TOKEN, dependent))
                continue
            edges.append(
                TypedDependency(
                    short_relation(spacy_token.dep_),
                    indexed[spacy_token.head.i],
                    dependent,
                )
            )
        return edges
