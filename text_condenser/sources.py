from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

logger = logging.getLogger(__name__)

ITEM_SEPARATOR = "\n\n"  # blank line keeps a boundary between items

class TextSource(Protocol):
    """Where conversation items come from (chat page, file, ...), oldest first."""

    def count_items(self) -> int: ...

    def fetch_recent_items(self, limit: int) -> Sequence[str]: ...

class SummarySink(Protocol):
    """Receives a finished summary (clipboard, UI panel, download ...)."""

    def deliver(self, summary: str) -> None: ...

@dataclass
class ListSource:
    items: List[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ListSource":
        # one item per blank-line separated paragraph
        paragraphs = [p.strip() for p in text.replace("\r\n", "\n").split(ITEM_SEPARATOR)]
        return cls(items=[p for p in paragraphs if p])

    def count_items(self) -> int:
        return len(self.items)

    def fetch_recent_items(self, limit: int) -> Sequence[str]:
        return self.items[-limit:] if limit > 0 else []

@dataclass
class MemorySink:
    delivered: List[str] = field(default_factory=list)

    def deliver(self, summary: str) -> None:
        self.delivered.append(summary)

def collect_recent_text(source: TextSource, window: int) -> str:
    items = source.fetch_recent_items(window)
    texts = [t.strip() for t in items if t and t.strip()]
    logger.debug("Collected %d of %d requested items", len(texts), window)
    return ITEM_SEPARATOR.join(texts)
