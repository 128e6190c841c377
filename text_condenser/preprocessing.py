from __future__ import annotations
import re
import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional
from .config import InvalidConfigurationError
from .datatypes import Document, Sentence

logger = logging.getLogger(__name__)

RE_WHITESPACE = re.compile(r"\s+")
RE_BOUNDARY   = re.compile(r"(?<=[.!?])\s+")   # punctuation stays with the left sentence
RE_NEWLINES   = re.compile(r"\n+")

_WORD_RE = re.compile(r"[a-z0-9äöüßáàéèíìóòúù]+")  # letters, digits, common diacritics

# Minimal lists, enough to keep chat filler out of the frequency map.
STOPWORDS_EN = frozenset((
    "the,and,for,are,not,that,this,with,you,was,have,from,they,will,what,when,"
    "which,there,were,been,has,but,all,any,can,if,or,as,at,by,on,it,is,a,an,of,"
    "in,to,be,do,so,its,also"
).split(","))

STOPWORDS_DE = frozenset((
    "der,das,die,und,ist,im,den,ein,eine,als,zu,mit,auf,für,nicht,dem,aus,sich,"
    "wie,sind,haben,hat,wurde,war,noch,bei,sie,er,es,wir,auch"
).split(","))

STOPWORD_CORPORA: Dict[str, FrozenSet[str]] = {
    "en": STOPWORDS_EN,
    "de": STOPWORDS_DE,
}

def build_stopwords(languages: Iterable[str] = ("en", "de"),
                    extra: Optional[Iterable[str]] = None) -> FrozenSet[str]:
    words = set()
    for lang in languages:
        try:
            words |= STOPWORD_CORPORA[lang]
        except KeyError:
            raise InvalidConfigurationError(
                f"Unknown stopword language: {lang!r} "
                f"(available: {', '.join(sorted(STOPWORD_CORPORA))})") from None
    if isinstance(extra, str):
        extra = [extra]  # one word, not its characters
    if extra:
        words |= {w.strip().lower() for w in extra if w.strip()}
    return frozenset(words)

STOPWORDS = build_stopwords()

@dataclass
class PreprocessConfig:
    stopwords: FrozenSet[str] = field(default_factory=lambda: STOPWORDS)
    min_token_length: int = 3

def normalize_whitespace(text: str) -> str:
    return RE_WHITESPACE.sub(" ", text).strip()

def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences.

    Boundaries are ``.``, ``!`` or ``?`` followed by whitespace, applied to the
    whitespace-collapsed text. When no boundary is found the raw text is split on
    line breaks instead (items are joined by blank lines upstream), and when that
    also gives a single chunk the whole text is one sentence.
    """
    normalized = normalize_whitespace(text)
    if not normalized:
        return []

    parts = RE_BOUNDARY.split(normalized)
    if len(parts) == 1:
        parts = [normalize_whitespace(p) for p in RE_NEWLINES.split(text)]
    parts = [p.strip() for p in parts if p.strip()]
    return parts or [normalized]

def tokenize(text: str, cfg: Optional[PreprocessConfig] = None) -> List[str]:
    cfg = cfg or PreprocessConfig()
    toks = _WORD_RE.findall(text.lower())
    return [t for t in toks if len(t) >= cfg.min_token_length and t not in cfg.stopwords]

def preprocess_text(text: str, max_sentences: int, cfg: Optional[PreprocessConfig] = None) -> Document:
    cfg = cfg or PreprocessConfig()
    sentences = [Sentence(idx=i, text=s, tokens=tokenize(s, cfg))
                 for i, s in enumerate(split_sentences(text))]
    logger.debug("Segmented %d sentences", len(sentences))
    return Document(raw_text=text, sentences=sentences,
                    max_sentences=max_sentences, stopwords=frozenset(cfg.stopwords))
