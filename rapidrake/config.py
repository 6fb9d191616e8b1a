"""
config.py

RakeConfiguration: the single, immutable parameter object for RAKE.

One instance is created per algorithm and never mutated. Every field is
supplied by the caller except ``phrase_delimiters`` and
``stemmer_language``, which carry documented defaults.
"""

from __future__ import annotations

import re
from typing import Any, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Characters that split the normalized token stream into phrases.
DEFAULT_PHRASE_DELIMITERS = r"[-,.?():;\"!/]"

# Characters padded with spaces before whitespace tokenization.
PUNCTUATION_PAD_CHARS = "-,.?():;\"!/"

# Penn Treebank verb tags; a common choice for ``stop_tags``.
VERB_TAGS: FrozenSet[str] = frozenset({"VB", "VBD", "VBG", "VBN", "VBP", "VBZ"})


def _strings(values: Any, field: str) -> list:
    try:
        out = list(values)
    except TypeError as e:
        raise ValueError(f"{field} must be an iterable of strings") from e
    for v in out:
        if not isinstance(v, str):
            raise ValueError(f"{field} entries must be strings, got {v!r}")
    return out


class RakeConfiguration(BaseModel):
    """
    Parameters RAKE uses to identify and score candidate keywords.

    Attributes
    ----------
    stop_words:
        Words treated like phrase delimiters. Matched against lowercased
        tokens, so entries are lowercased on construction.
    stop_tags:
        Part-of-speech tags treated like phrase delimiters. Any token the
        tagger labels with one of these tags splits the phrase.
    min_word_length:
        Tokens with fewer characters than this are treated as delimiters.
    stem:
        If True, words are stemmed and frequency/degree statistics are
        computed over the stemmed forms.
    phrase_delimiters:
        Regular expression (normally a character class) used to split the
        filtered text into candidate phrases. An iterable of single
        characters is also accepted and turned into an escaped class.
    stemmer_language:
        Language passed through to the stemmer (Snowball language name).
    """

    model_config = ConfigDict(frozen=True)

    stop_words: FrozenSet[str]
    stop_tags: FrozenSet[str]
    min_word_length: int = Field(..., ge=0)
    stem: bool
    phrase_delimiters: str = DEFAULT_PHRASE_DELIMITERS
    stemmer_language: str = "english"

    @field_validator("stop_words", mode="before")
    @classmethod
    def _normalize_stop_words(cls, value: Any) -> Any:
        if isinstance(value, str):
            raise ValueError("stop_words must be a collection of words, not a string")
        return frozenset(w.strip().lower() for w in _strings(value, "stop_words"))

    @field_validator("stop_tags", mode="before")
    @classmethod
    def _normalize_stop_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            raise ValueError("stop_tags must be a collection of tags, not a string")
        return frozenset(t.strip() for t in _strings(value, "stop_tags"))

    @field_validator("phrase_delimiters", mode="before")
    @classmethod
    def _coerce_delimiters(cls, value: Any) -> Any:
        if isinstance(value, str):
            pattern = value
        else:
            chars = set(_strings(value, "phrase_delimiters"))
            if not chars or any(len(c) != 1 for c in chars):
                raise ValueError(
                    "phrase_delimiters must be a regex or a non-empty set of single characters"
                )
            pattern = "[" + "".join(re.escape(c) for c in sorted(chars)) + "]"

        if not pattern:
            raise ValueError("phrase_delimiters cannot be empty")
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(f"invalid phrase_delimiters pattern {pattern!r}: {e}") from e
        return pattern

    @field_validator("stemmer_language")
    @classmethod
    def _lower_language(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("stemmer_language cannot be empty")
        return value

    @property
    def delimiter_pattern(self) -> "re.Pattern[str]":
        """Compiled ``phrase_delimiters`` (``re`` caches the compilation)."""
        return re.compile(self.phrase_delimiters)

    @classmethod
    def minimal(cls, **overrides: Any) -> "RakeConfiguration":
        """
        The least restrictive configuration: no stop words, no stop tags,
        no minimum length, no stemming, default delimiters.

        Keyword arguments override individual fields, e.g.
        ``RakeConfiguration.minimal(stem=True, stop_words={"text"})``.
        """
        params: dict = {
            "stop_words": frozenset(),
            "stop_tags": frozenset(),
            "min_word_length": 0,
            "stem": False,
        }
        params.update(overrides)
        return cls(**params)

