"""
result.py

Result: the immutable output of running RAKE on one document.

Three parallel, same-length sequences in first-occurrence order:

    full_keywords[i]     → keyword as it appeared (lowercased)
    stemmed_keywords[i]  → its stemmed form ("" when stemming is off)
    scores[i]            → its RAKE score
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import pandas as pd

from .candidates import CandidatePhrase


@dataclass(frozen=True)
class Result:
    full_keywords: Tuple[str, ...] = ()
    stemmed_keywords: Tuple[str, ...] = ()
    scores: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        n = len(self.full_keywords)
        if len(self.stemmed_keywords) != n or len(self.scores) != n:
            raise ValueError(
                "Result sequences must have equal length: "
                f"{n} keywords, {len(self.stemmed_keywords)} stems, "
                f"{len(self.scores)} scores"
            )

    def __len__(self) -> int:
        return len(self.full_keywords)

    def __iter__(self) -> Iterator[Tuple[str, str, float]]:
        return iter(zip(self.full_keywords, self.stemmed_keywords, self.scores))

    def __str__(self) -> str:
        return self.describe()

    # ------------------------------------------------------------------
    # Derived results (always new objects)
    # ------------------------------------------------------------------

    def distinct(self) -> "Result":
        """
        Keep only the first occurrence of each distinct keyword.

        Later duplicates are dropped together with their stem and score;
        retained entries keep their relative order.
        """
        seen = set()
        keep: List[int] = []
        for i, keyword in enumerate(self.full_keywords):
            if keyword in seen:
                continue
            seen.add(keyword)
            keep.append(i)
        return self._select(keep)

    def top(self, n: int) -> "Result":
        """
        The ``n`` highest-scoring entries, best first.

        Ties are broken by first occurrence.
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        order = sorted(range(len(self)), key=lambda i: (-self.scores[i], i))
        return self._select(order[:n])

    def _select(self, indices: Sequence[int]) -> "Result":
        return Result(
            full_keywords=tuple(self.full_keywords[i] for i in indices),
            stemmed_keywords=tuple(self.stemmed_keywords[i] for i in indices),
            scores=tuple(self.scores[i] for i in indices),
        )

    # ------------------------------------------------------------------
    # Display / export
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Render as ``"phrase (score), phrase (score), ..."`` (2 decimals)."""
        return ", ".join(f"{kw} ({s:.2f})" for kw, s in zip(self.full_keywords, self.scores))

    def to_frame(self) -> pd.DataFrame:
        """
        One row per keyword with columns ``keyword``, ``stem`` and ``score``,
        in first-occurrence order.
        """
        return pd.DataFrame(
            {
                "keyword": list(self.full_keywords),
                "stem": list(self.stemmed_keywords),
                "score": pd.Series(self.scores, dtype="float64"),
            },
            columns=["keyword", "stem", "score"],
        )


def assemble(phrases: Sequence[CandidatePhrase]) -> Result:
    """Convert scored candidate phrases into a :class:`Result`."""
    full: List[str] = []
    stemmed: List[str] = []
    scores: List[float] = []

    for phrase in phrases:
        if phrase.score is None:
            raise ValueError(f"phrase {phrase.phrase!r} has not been scored")
        full.append(phrase.phrase)
        stemmed.append(phrase.stemmed_phrase or "")
        scores.append(phrase.score)

    return Result(tuple(full), tuple(stemmed), tuple(scores))
