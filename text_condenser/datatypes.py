from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, FrozenSet

@dataclass
class Sentence:
    idx: int
    text: str
    tokens: List[str] = field(default_factory=list)
    score: float = 0.0

@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence]
    max_sentences: int
    stopwords: FrozenSet[str] = frozenset()

TermFrequencyMap = Counter  # token -> count, one per Document

@dataclass(frozen=True)
class SummaryContext:
    """State carried between pipeline invocations (last result, auto trigger)."""
    last_summary: str = ""
    auto_mode: bool = False
    last_triggered_at: Optional[float] = None

STATUS_READY = "ready"
STATUS_EMPTY = "empty"
STATUS_SKIPPED = "skipped"

@dataclass(frozen=True)
class SummaryOutcome:
    status: str
    summary: str = ""
    item_count: int = 0
    reason: str = ""
