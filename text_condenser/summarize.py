from __future__ import annotations
import time
import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple
from .config import InvalidConfigurationError, SummarizerConfig
from .datatypes import (Document, Sentence, SummaryContext, SummaryOutcome,
                        STATUS_EMPTY, STATUS_READY, STATUS_SKIPPED)
from .preprocessing import preprocess_text, PreprocessConfig, STOPWORDS, build_stopwords
from .features import build_term_frequencies
from .scoring import score_sentences, rank_sentences, DEFAULT_POSITION_DECAY
from .sources import TextSource, SummarySink, collect_recent_text

logger = logging.getLogger(__name__)

def generate_summary(doc: Document, ranked: Optional[List[Sentence]] = None) -> str:
    n = len(doc.sentences)
    k = doc.max_sentences
    if n <= k:
        # nothing to discard
        return " ".join(s.text for s in doc.sentences)
    assert ranked is not None, "ranked sentences are required when N > K"
    selected = sorted(ranked[:k], key=lambda s: s.idx)  # restore original order
    logger.debug("Selected sentences %s of %d", [s.idx for s in selected], n)
    return " ".join(s.text for s in selected)

def summarize(text: str,
              max_sentences: int,
              stopwords: Optional[Iterable[str]] = None,
              position_decay: int = DEFAULT_POSITION_DECAY,
              min_token_length: int = 3) -> str:
    # Pipeline glue
    if max_sentences < 1:
        raise InvalidConfigurationError(f"max_sentences must be >= 1, got {max_sentences}")
    if position_decay < 1:
        raise InvalidConfigurationError(f"position_decay must be >= 1, got {position_decay}")
    if min_token_length < 1:
        raise InvalidConfigurationError(f"min_token_length must be >= 1, got {min_token_length}")

    words = STOPWORDS if stopwords is None else build_stopwords((), extra=stopwords)
    cfg = PreprocessConfig(stopwords=words, min_token_length=min_token_length)
    doc = preprocess_text(text, max_sentences=max_sentences, cfg=cfg)
    if not doc.sentences:
        return ""
    if len(doc.sentences) <= max_sentences:
        return generate_summary(doc)

    tf = build_term_frequencies(doc)
    score_sentences(doc, tf, position_decay=position_decay)
    return generate_summary(doc, rank_sentences(doc))

def run_summarization(source: TextSource,
                      context: SummaryContext,
                      config: Optional[SummarizerConfig] = None,
                      manual: bool = False,
                      sink: Optional[SummarySink] = None,
                      now: Optional[float] = None) -> Tuple[SummaryContext, SummaryOutcome]:
    """
    One trigger of the summarizer over a text source.

    Manual runs always proceed. Automatic runs need ``context.auto_mode``, at
    least ``config.message_threshold`` items and no other automatic run within
    ``config.cooldown_seconds``. Returns the updated context and what happened;
    the caller decides how to surface the outcome.
    """
    config = (config or SummarizerConfig()).validate()
    stopwords = build_stopwords(config.languages)
    now = time.monotonic() if now is None else now

    count = source.count_items()
    if not manual:
        if not context.auto_mode:
            return context, SummaryOutcome(STATUS_SKIPPED, item_count=count, reason="auto mode is off")
        if count < config.message_threshold:
            return context, SummaryOutcome(
                STATUS_SKIPPED, item_count=count,
                reason=f"{count} items, threshold is {config.message_threshold}")
        if (context.last_triggered_at is not None
                and now - context.last_triggered_at < config.cooldown_seconds):
            return context, SummaryOutcome(STATUS_SKIPPED, item_count=count, reason="cooling down")
        context = replace(context, last_triggered_at=now)

    text = collect_recent_text(source, config.message_window)
    if not text.strip():
        logger.info("Nothing to summarize (%d items)", count)
        return context, SummaryOutcome(STATUS_EMPTY, item_count=count, reason="nothing to summarize")

    summary = summarize(text, config.summary_sentences, stopwords,
                        position_decay=config.position_decay,
                        min_token_length=config.min_token_length)
    context = replace(context, last_summary=summary)
    logger.info("Summary ready: %d items, %d characters", count, len(summary))

    if sink is not None:
        try:
            sink.deliver(summary)
        except Exception:
            logger.error("Summary delivery failed")
            raise
    return context, SummaryOutcome(STATUS_READY, summary=summary, item_count=count)
