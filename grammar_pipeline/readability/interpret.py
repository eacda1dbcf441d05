"""Flesch-Kincaid grade -> reader category."""

from __future__ import annotations

import math
from dataclasses import dataclass

# (low, high, complexity, explanation); bounds inclusive, None is open.
FLESCH_KINCAID_BANDS = (
    (None, 0, "NO CATEGORY", "This is not really a reading material"),
    (0, 3, "BASIC", "Learning to read books"),
    (3, 6, "BASIC", "New to reading, can read something simple like 'The Gruffalo'"),
    (
        6,
        9,
        "AVERAGE",
        "Moderate reader, the majority. Can read something like 'Harry Potter', short blogs, social media, email",
    ),
    (9, 12, "AVERAGE", "Confident reader. Can read something like 'Jurassic Park', in-depth blogs, ebooks"),
    (12, 15, "SKILLED", "Advanced reader. Can read something like 'A brief history of time', whitepaper books"),
    (15, None, "SKILLED", "Proficient reader. Can read everything, including academic papers"),
)


@dataclass(frozen=True)
class ReadabilityInterpretation:
    score: float
    complexity: str
    explanation: str

    @property
    def label(self) -> str:
        return f"{self.complexity}: {self.explanation}"

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "complexity": self.complexity,
            "explanation": self.explanation,
            "label": self.label,
        }


def interpret_flesch_kincaid(score: float) -> ReadabilityInterpretation:
    """First band containing ``score`` wins, so shared edges (3, 6, ...) go to the lower band."""
    value = float(score)
    if math.isnan(value):
        raise ValueError("Flesch-Kincaid score must be a number, got NaN")
    for low, high, complexity, explanation in FLESCH_KINCAID_BANDS:
        if (low is None or value >= low) and (high is None or value <= high):
            return ReadabilityInterpretation(score=value, complexity=complexity, explanation=explanation)
    raise ValueError(f"No readability band for score {score!r}")
