"""Readability score interpretation."""

from .interpret import ReadabilityInterpretation, interpret_flesch_kincaid

__all__ = ["ReadabilityInterpretation", "interpret_flesch_kincaid"]
