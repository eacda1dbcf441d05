"""Tag-level grammar features: lexical counters and imperatives."""

from .features import count_features
from .imperatives import find_imperatives

__all__ = ["count_features", "find_imperatives"]
