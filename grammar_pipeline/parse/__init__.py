"""Tagging and dependency-parsing adapters over spaCy."""

from .spacy_parser import (
    DependencyParserAdapter,
    ModelLoadError,
    SharedNlpModel,
    get_shared_model,
    load_nlp,
    tag_sentences,
)

__all__ = [
    "DependencyParserAdapter",
    "ModelLoadError",
    "SharedNlpModel",
    "get_shared_model",
    "load_nlp",
    "tag_sentences",
]
