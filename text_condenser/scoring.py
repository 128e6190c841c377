from __future__ import annotations
import math
from typing import List
from .datatypes import Document, Sentence, TermFrequencyMap

DEFAULT_POSITION_DECAY = 8

def position_bonus(idx: int, decay: int = DEFAULT_POSITION_DECAY) -> float:
    # 1.0 for the first `decay` sentences, 1/2 for the next block, and so on
    return 1.0 / (1 + idx // decay)

def score_sentence(sentence: Sentence, tf: TermFrequencyMap,
                   position_decay: int = DEFAULT_POSITION_DECAY) -> float:
    """
    Salience of one sentence.

    score = sum(tf[token]) / sqrt(max(1, #tokens)) * position_bonus(idx)

    The square-root length penalty keeps long sentences from winning purely by
    containing many common words. Sentences without significant tokens score 0.
    """
    if not sentence.tokens:
        return 0.0
    token_score = sum(tf.get(t, 0) for t in sentence.tokens)
    length_penalty = math.sqrt(max(1, len(sentence.tokens)))
    return (token_score / length_penalty) * position_bonus(sentence.idx, position_decay)

def score_sentences(doc: Document, tf: TermFrequencyMap,
                    position_decay: int = DEFAULT_POSITION_DECAY) -> List[float]:
    scores: List[float] = []
    for s in doc.sentences:
        s.score = score_sentence(s, tf, position_decay=position_decay)
        scores.append(s.score)
    return scores

def rank_sentences(doc: Document) -> List[Sentence]:
    # highest score first; lower index wins ties
    return sorted(doc.sentences, key=lambda s: (-s.score, s.idx))
