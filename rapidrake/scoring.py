"""
scoring.py

RAKE word and phrase scoring.

For every candidate phrase of length L, each of its words gains one unit of
frequency and L - 1 units of degree. A word's score is

    score[w] = (degree[w] + frequency[w]) / frequency[w]
             = 1 + degree[w] / frequency[w]

and a phrase's score is the sum of its words' scores. Words that co-occur
with many others outrank words that mostly appear alone.
"""

from __future__ import annotations

import dataclasses
from collections import Counter
from typing import Dict, List, Sequence, Tuple

from .candidates import CandidatePhrase
from .config import RakeConfiguration
from .errors import InternalInvariantError


def word_statistics(
    phrases: Sequence[CandidatePhrase],
    stem: bool,
) -> Tuple[Counter, Counter]:
    """
    Build the per-document frequency and degree tables.

    Returns
    -------
    frequency:
        word → number of occurrences across all candidate phrases.
    degree:
        word → sum over occurrences of the number of other words in the
        same phrase. Single-word phrases contribute 0.
    """
    frequency: Counter = Counter()
    degree: Counter = Counter()

    for phrase in phrases:
        words = phrase.scoring_words(stem)
        co_occurring = len(words) - 1
        for word in words:
            frequency[word] += 1
            degree[word] += co_occurring

    return frequency, degree


def word_scores(frequency: Counter, degree: Counter) -> Dict[str, float]:
    """``1 + degree[w] / frequency[w]`` for every word in ``frequency``."""
    return {w: 1.0 + degree[w] / freq for w, freq in frequency.items()}


def score(
    phrases: Sequence[CandidatePhrase],
    config: RakeConfiguration,
) -> List[CandidatePhrase]:
    """
    Score every candidate phrase of one document.

    Returns new CandidatePhrase objects (same order) with ``score`` set.

    Raises
    ------
    InternalInvariantError
        If a phrase word is missing from the score table. Every word is
        counted in the statistics pass, so this indicates a bookkeeping bug.
    """
    frequency, degree = word_statistics(phrases, config.stem)
    table = word_scores(frequency, degree)

    scored: List[CandidatePhrase] = []
    for phrase in phrases:
        total = 0.0
        for word in phrase.scoring_words(config.stem):
            try:
                total += table[word]
            except KeyError:
                raise InternalInvariantError(
                    f"word {word!r} of phrase {phrase.phrase!r} has no score"
                ) from None
        scored.append(dataclasses.replace(phrase, score=total))

    return scored
