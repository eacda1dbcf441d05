"""Tense/aspect classification over dependency edges."""

from .rules import TAM_RULES, check_dependency, classify

__all__ = ["TAM_RULES", "check_dependency", "classify"]
