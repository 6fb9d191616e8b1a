import re

import pytest
from pydantic import ValidationError

from rapidrake import DEFAULT_PHRASE_DELIMITERS, VERB_TAGS, RakeConfiguration


def test_minimal_configuration_defaults():
    config = RakeConfiguration.minimal()

    assert config.stop_words == frozenset()
    assert config.stop_tags == frozenset()
    assert config.min_word_length == 0
    assert config.stem is False
    assert config.phrase_delimiters == DEFAULT_PHRASE_DELIMITERS
    assert config.stemmer_language == "english"


def test_minimal_accepts_overrides():
    config = RakeConfiguration.minimal(stem=True, stop_words=["Text"], stop_tags=VERB_TAGS)

    assert config.stem is True
    assert config.stop_words == frozenset({"text"})
    assert "VBD" in config.stop_tags


def test_required_fields():
    with pytest.raises(ValidationError):
        RakeConfiguration(stop_words=set(), stop_tags=set(), stem=False)


def test_stop_words_are_trimmed_and_lowercased():
    config = RakeConfiguration.minimal(stop_words={" The ", "SHIRT"})
    assert config.stop_words == frozenset({"the", "shirt"})


def test_stop_words_must_not_be_a_plain_string():
    with pytest.raises(ValidationError):
        RakeConfiguration.minimal(stop_words="the")


def test_stop_words_must_be_strings():
    with pytest.raises(ValidationError):
        RakeConfiguration.minimal(stop_words=[1, 2])


def test_negative_min_word_length_rejected():
    with pytest.raises(ValidationError):
        RakeConfiguration.minimal(min_word_length=-1)


def test_invalid_delimiter_regex_rejected():
    with pytest.raises(ValidationError):
        RakeConfiguration.minimal(phrase_delimiters="[unclosed")


def test_delimiters_from_character_set():
    config = RakeConfiguration.minimal(phrase_delimiters={".", "-", "]"})

    assert config.delimiter_pattern.split("a.b-c]d") == ["a", "b", "c", "d"]
    assert config.delimiter_pattern.split("a,b") == ["a,b"]


def test_delimiter_set_entries_must_be_single_characters():
    with pytest.raises(ValidationError):
        RakeConfiguration.minimal(phrase_delimiters=[".", "ab"])


def test_delimiter_pattern_is_compiled():
    config = RakeConfiguration.minimal()
    assert isinstance(config.delimiter_pattern, re.Pattern)
    assert config.delimiter_pattern.pattern == DEFAULT_PHRASE_DELIMITERS


def test_stemmer_language_is_normalized():
    config = RakeConfiguration.minimal(stemmer_language=" German ")
    assert config.stemmer_language == "german"


def test_configuration_is_immutable():
    config = RakeConfiguration.minimal()
    with pytest.raises(ValidationError):
        config.stem = True


def test_equal_configurations_compare_equal():
    assert RakeConfiguration.minimal(stop_words=["a"]) == RakeConfiguration.minimal(stop_words={"A"})
