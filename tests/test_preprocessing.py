import pytest

from text_condenser.config import InvalidConfigurationError
from text_condenser.preprocessing import (
    PreprocessConfig, build_stopwords, normalize_whitespace, preprocess_text,
    split_sentences, tokenize, STOPWORDS,
)


def test_split_on_terminal_punctuation():
    assert split_sentences("Hello world. How are you? Fine!") == [
        "Hello world.", "How are you?", "Fine!",
    ]


def test_split_collapses_whitespace():
    assert split_sentences("Hi  there.\n\nNext\tone.  ") == ["Hi there.", "Next one."]


def test_split_falls_back_to_newlines():
    assert split_sentences("first line\nsecond   line\n\n\nthird") == [
        "first line", "second line", "third",
    ]


def test_newline_fallback_keeps_trailing_punctuation():
    assert split_sentences("Item one\n\nItem two.") == ["Item one", "Item two."]


def test_single_chunk_without_boundaries():
    assert split_sentences("Version 1.2 is out") == ["Version 1.2 is out"]


def test_punctuation_without_whitespace_is_not_a_boundary():
    assert split_sentences("see example.com/docs for details") == ["see example.com/docs for details"]


@pytest.mark.parametrize("text", ["", "   ", "\n\n \t"])
def test_split_empty_input(text):
    assert split_sentences(text) == []


def test_normalize_whitespace():
    assert normalize_whitespace("  a \n\n b\t c ") == "a b c"


def test_tokenize_lowercases_and_filters():
    assert tokenize("The Café über ALLES, 42 ok!") == ["café", "über", "alles"]


def test_tokenize_keeps_duplicates_in_order():
    assert tokenize("Cats chase cats; dogs chase cats.") == ["cats", "chase", "cats", "dogs", "chase", "cats"]


def test_tokenize_treats_symbols_as_separators():
    assert tokenize("well-known e-mail #hashtag") == ["well", "known", "mail", "hashtag"]


def test_tokenize_drops_german_stopwords():
    assert tokenize("Die Katze und der Hund sind auch hier") == ["katze", "hund", "hier"]


def test_tokenize_with_custom_config():
    cfg = PreprocessConfig(stopwords=frozenset(), min_token_length=1)
    assert tokenize("a b the", cfg) == ["a", "b", "the"]


def test_default_stopwords_cover_both_languages():
    assert {"the", "which", "und", "für"} <= STOPWORDS
    assert build_stopwords(("en",)).isdisjoint({"und", "für"})


def test_build_stopwords_extra_words_are_lowercased():
    words = build_stopwords(("de",), extra=["Chat", " GPT ", ""])
    assert {"chat", "gpt", "und"} <= words
    assert "" not in words


def test_build_stopwords_unknown_language():
    with pytest.raises(InvalidConfigurationError):
        build_stopwords(("en", "xx"))


def test_preprocess_assigns_contiguous_indices(long_text):
    doc = preprocess_text(long_text, max_sentences=3)
    assert [s.idx for s in doc.sentences] == list(range(len(doc.sentences)))
    assert len(doc.sentences) == 12
    assert doc.max_sentences == 3
    assert doc.sentences[0].tokens == ["python", "packaging", "uses", "pyproject", "file"]
    assert all(s.score == 0.0 for s in doc.sentences)


def test_build_stopwords_single_string_is_not_split_into_characters():
    assert build_stopwords((), extra="Sentence") == frozenset({"sentence"})
