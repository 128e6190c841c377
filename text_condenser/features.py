from __future__ import annotations
from collections import Counter
from typing import List, Tuple
from .datatypes import Document, TermFrequencyMap

def build_term_frequencies(doc: Document) -> TermFrequencyMap:
    # fresh map per document; never reuse one across calls
    tf: TermFrequencyMap = Counter()
    for s in doc.sentences:
        tf.update(s.tokens)
    return tf

def top_terms(tf: TermFrequencyMap, k: int = 10) -> List[Tuple[str, int]]:
    # most frequent first, alphabetical among equal counts
    return sorted(tf.items(), key=lambda x: (-x[1], x[0]))[:k]
