"""
candidates.py

Candidate identification for RAKE:

- normalize      → pad punctuation, split sentences, tokenize, lowercase, tag
- filter_tokens  → replace stop words / stop tags / short / non-alphabetic
                   tokens with a delimiter marker
- segment        → split the filtered stream on phrase delimiters into
                   CandidatePhrase objects (optionally stemmed)

The sentence splitter, POS tagger and stemmer are external collaborators
(see ``backends.py``); these functions only depend on their narrow
``split`` / ``tag`` / ``stem`` interfaces.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from .config import PUNCTUATION_PAD_CHARS, RakeConfiguration
from .errors import ContractViolation

if TYPE_CHECKING:
    from .backends import PosTagger, SentenceSplitter, Stemmer


# Marker substituted for filtered tokens; always inside the default delimiters.
DELIMITER_MARKER = "."

_PAD_RE = re.compile("([" + re.escape(PUNCTUATION_PAD_CHARS) + "])")
_PUNCTUATION = frozenset(string.punctuation)


@dataclass(frozen=True)
class Token:
    text: str  # lowercased token text
    tag: str   # POS tag assigned by the tagger (advisory)


@dataclass(frozen=True)
class CandidatePhrase:
    """
    A maximal run of content words bounded by delimiters.

    Attributes
    ----------
    phrase:
        Trimmed phrase text, e.g. ``"good dogs"``.
    words:
        Tokenized phrase, e.g. ``("good", "dogs")``.
    stemmed_words:
        Stemmed ``words`` (``("good", "dog")``) or None if stemming is off.
    stemmed_phrase:
        ``stemmed_words`` joined by spaces, or None if stemming is off.
    score:
        RAKE score, populated by :func:`rapidrake.scoring.score`.
    """

    phrase: str
    words: Tuple[str, ...]
    stemmed_words: Optional[Tuple[str, ...]] = None
    stemmed_phrase: Optional[str] = None
    score: Optional[float] = None

    def scoring_words(self, stem: bool) -> Tuple[str, ...]:
        """Word sequence used for statistics: stemmed if ``stem`` else raw."""
        if not stem:
            return self.words
        if self.stemmed_words is None:
            raise ValueError(
                f"phrase {self.phrase!r} was segmented without stemming"
            )
        return self.stemmed_words


def has_alpha(text: str) -> bool:
    return any(ch.isalpha() for ch in text)


def pad_punctuation(text: str) -> str:
    """Surround each punctuation pad character with single spaces."""
    return _PAD_RE.sub(r" \1 ", text)


# ---------------------------------------------------------------------------
# Normalizer
# ---------------------------------------------------------------------------


def normalize(
    text: str,
    splitter: "SentenceSplitter",
    tagger: "PosTagger",
) -> List[Token]:
    """
    Turn raw text into a flat, tagged token stream.

    Punctuation is padded so the whitespace tokenizer never glues a word to
    a trailing comma or period. Each sentence is tagged independently, with
    one ``tagger.tag`` call per sentence.

    Raises
    ------
    ContractViolation
        If the splitter does not return a sequence of strings, or the tagger
        returns anything other than one string tag per token for a sentence.
    """
    padded = pad_punctuation(text)
    sentences = splitter.split(padded)
    if isinstance(sentences, str) or not isinstance(sentences, Sequence):
        raise ContractViolation(
            f"sentence splitter returned {type(sentences).__name__}, "
            "expected a sequence of strings"
        )

    tokens: List[Token] = []
    for sent_index, sentence in enumerate(sentences):
        if not isinstance(sentence, str):
            raise ContractViolation(
                f"sentence splitter returned {type(sentence).__name__} for sentence "
                f"{sent_index}, expected str"
            )
        words = [w.strip().lower() for w in sentence.split()]
        tags = tagger.tag(words)

        if isinstance(tags, str) or not isinstance(tags, Sequence):
            raise ContractViolation(
                f"tagger returned {type(tags).__name__} for sentence {sent_index}, "
                "expected a sequence of tags"
            )
        if len(tags) != len(words):
            raise ContractViolation(
                f"tagger returned {len(tags)} tags for {len(words)} tokens "
                f"in sentence {sent_index}"
            )
        for tag_index, t in enumerate(tags):
            if not isinstance(t, str):
                raise ContractViolation(
                    f"tagger returned {type(t).__name__} for token {tag_index} "
                    f"in sentence {sent_index}, expected str"
                )

        tokens.extend(Token(w, t.strip()) for w, t in zip(words, tags))

    return tokens


# ---------------------------------------------------------------------------
# CandidateFilter
# ---------------------------------------------------------------------------


def is_punctuation(token: str) -> bool:
    return len(token) == 1 and token in _PUNCTUATION


def filter_tokens(tokens: Sequence[Token], config: RakeConfiguration) -> List[str]:
    """
    Map each token to itself or to :data:`DELIMITER_MARKER`.

    Single punctuation characters pass through (they act as delimiters
    downstream). Any other token is replaced by the marker when its tag is a
    stop tag, it is shorter than ``min_word_length``, it is a stop word, or
    it contains no alphabetic character.
    """
    out: List[str] = []
    for token in tokens:
        word = token.text
        if is_punctuation(word):
            out.append(word)
        elif (
            token.tag in config.stop_tags
            or len(word) < config.min_word_length
            or word in config.stop_words
            or not has_alpha(word)
        ):
            out.append(DELIMITER_MARKER)
        else:
            out.append(word)
    return out


# ---------------------------------------------------------------------------
# PhraseSegmenter
# ---------------------------------------------------------------------------


def segment(
    filtered: Sequence[str],
    config: RakeConfiguration,
    stemmer: Optional["Stemmer"] = None,
) -> List[CandidatePhrase]:
    """
    Split the filtered token stream into candidate phrases.

    The tokens are joined with single spaces and the joined text is split on
    ``config.phrase_delimiters``. Fragments without any alphabetic character
    are dropped; the rest are trimmed and split on single spaces. Fragment
    order is preserved.
    """
    if config.stem and stemmer is None:
        raise ValueError("a stemmer is required when config.stem is True")

    joined = " ".join(filtered)
    phrases: List[CandidatePhrase] = []

    for fragment in config.delimiter_pattern.split(joined):
        if not fragment or not has_alpha(fragment):
            continue

        phrase = fragment.strip()
        words = tuple(phrase.split(" "))

        if config.stem:
            stemmed = tuple(
                stemmer.stem(w, config.stemmer_language) for w in words  # type: ignore[union-attr]
            )
            phrases.append(
                CandidatePhrase(
                    phrase=phrase,
                    words=words,
                    stemmed_words=stemmed,
                    stemmed_phrase=" ".join(stemmed),
                )
            )
        else:
            phrases.append(CandidatePhrase(phrase=phrase, words=words))

    return phrases
