import math
from collections import Counter

import pytest

from text_condenser.datatypes import Sentence
from text_condenser.features import build_term_frequencies, top_terms
from text_condenser.preprocessing import preprocess_text
from text_condenser.scoring import position_bonus, rank_sentences, score_sentence, score_sentences


def test_term_frequencies_count_every_occurrence(pets_text):
    tf = build_term_frequencies(preprocess_text(pets_text, max_sentences=2))
    assert tf["sentence"] == 3
    assert tf["cats"] == 2
    assert tf["great"] == 2
    assert "this" not in tf
    assert "is" not in tf


def test_term_frequencies_are_per_document():
    first = build_term_frequencies(preprocess_text("Apples grow here. Apples again.", 1))
    second = build_term_frequencies(preprocess_text("Pears grow here.", 1))
    assert first["apples"] == 2
    assert "apples" not in second
    assert second["grow"] == 1


def test_top_terms_orders_by_count_then_alphabetically():
    tf = Counter({"zeta": 2, "alpha": 2, "beta": 5, "gamma": 1})
    assert top_terms(tf, k=3) == [("beta", 5), ("alpha", 2), ("zeta", 2)]


@pytest.mark.parametrize("idx, decay, expected", [
    (0, 8, 1.0),
    (7, 8, 1.0),
    (8, 8, 0.5),
    (16, 8, 1 / 3),
    (3, 2, 0.5),
])
def test_position_bonus(idx, decay, expected):
    assert position_bonus(idx, decay) == pytest.approx(expected)


def test_score_formula():
    s = Sentence(idx=8, text="x", tokens=["alpha", "beta", "alpha"])
    tf = Counter({"alpha": 2, "beta": 1})
    assert score_sentence(s, tf) == pytest.approx(5 / math.sqrt(3) * 0.5)


def test_sentence_without_tokens_scores_zero():
    assert score_sentence(Sentence(idx=0, text="Ok.", tokens=[]), Counter({"ok": 4})) == 0.0


def test_scores_are_stored_on_sentences(pets_text):
    doc = preprocess_text(pets_text, max_sentences=2)
    scores = score_sentences(doc, build_term_frequencies(doc))
    assert scores == [s.score for s in doc.sentences]
    assert scores[1] == pytest.approx(3.5)
    assert scores[2] == pytest.approx(5 / math.sqrt(3))
    assert all(score >= 0 for score in scores)


def test_ranking_breaks_ties_by_lower_index(pets_text):
    doc = preprocess_text(pets_text, max_sentences=2)
    score_sentences(doc, build_term_frequencies(doc))
    assert doc.sentences[0].score == doc.sentences[4].score
    ranked = [s.idx for s in rank_sentences(doc)]
    assert ranked == [1, 2, 0, 4, 3]


def test_ranking_is_stable_across_runs(long_text):
    def ranked():
        doc = preprocess_text(long_text, max_sentences=4)
        score_sentences(doc, build_term_frequencies(doc))
        return [s.idx for s in rank_sentences(doc)]

    assert ranked() == ranked()
