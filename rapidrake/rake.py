"""
rake.py

RakeAlgorithm: runs Rapid Automatic Keyword Extraction on single documents.

Pipeline (per document, strictly forward):

    normalize → filter_tokens → segment → score → assemble

Quick usage
-----------
    from rapidrake import RakeAlgorithm, RakeConfiguration, VERB_TAGS

    config = RakeConfiguration(
        stop_words={"the", "a", "is"},
        stop_tags=VERB_TAGS,
        min_word_length=3,
        stem=True,
    )
    rake = RakeAlgorithm.with_nltk(config)

    result = rake.process("Compatibility of systems of linear constraints ...")
    print(result.distinct().top(5))
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from .backends import (
    NltkPosTagger,
    NltkSentenceSplitter,
    PosTagger,
    SentenceSplitter,
    SerializedSplitter,
    SerializedTagger,
    SnowballStemmer,
    SpacyPosTagger,
    SpacySentenceSplitter,
    Stemmer,
)
from .candidates import filter_tokens, normalize, segment
from .config import RakeConfiguration
from .result import Result, assemble
from .scoring import score


class RakeAlgorithm:
    """
    RAKE keyword extraction bound to one configuration and one set of
    external collaborators.

    The instance holds no per-document state: every call to :meth:`process`
    builds and discards its own frequency/degree/score tables, so one
    instance may be used for any number of documents, and from several
    threads. Calls into the sentence splitter and tagger are serialized
    per collaborator instance; filtering and scoring run unlocked.
    """

    def __init__(
        self,
        config: RakeConfiguration,
        splitter: SentenceSplitter,
        tagger: PosTagger,
        stemmer: Optional[Stemmer] = None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Parameters
        ----------
        config:
            Parameters RAKE will use.
        splitter:
            Object with ``split(text) -> list[str]``.
        tagger:
            Object with ``tag(tokens) -> list[str]`` returning exactly one
            tag per token.
        stemmer:
            Object with ``stem(word, language) -> str``. Defaults to
            :class:`SnowballStemmer` when ``config.stem`` is True.
        logger:
            Optional callback used when ``verbose=True`` in :meth:`process`.
            Falls back to ``print``.

        Raises
        ------
        ResourceLoadError
            If stemming is enabled and the stemmer does not support
            ``config.stemmer_language``.
        """
        if not isinstance(config, RakeConfiguration):
            raise TypeError("config must be a RakeConfiguration")

        self.config = config
        self.logger = logger
        self._splitter = SerializedSplitter(splitter)
        self._tagger = SerializedTagger(tagger)

        if stemmer is None and config.stem:
            stemmer = SnowballStemmer()
        self.stemmer = stemmer

        check = getattr(stemmer, "check_language", None)
        if config.stem and callable(check):
            check(config.stemmer_language)

    # ------------------------------------------------------------------
    # Convenience constructors
    # ------------------------------------------------------------------

    @classmethod
    def with_nltk(
        cls,
        config: RakeConfiguration,
        language: str = "english",
        auto_download: bool = True,
        logger: Optional[Callable[[str], None]] = None,
    ) -> "RakeAlgorithm":
        """Punkt sentence splitter + averaged perceptron tagger + Snowball."""
        return cls(
            config,
            splitter=NltkSentenceSplitter(language, auto_download=auto_download, log_fn=logger),
            tagger=NltkPosTagger(auto_download=auto_download, log_fn=logger),
            stemmer=SnowballStemmer(),
            logger=logger,
        )

    @classmethod
    def with_spacy(
        cls,
        config: RakeConfiguration,
        model: str = "en_core_web_sm",
        auto_download: bool = True,
        logger: Optional[Callable[[str], None]] = None,
    ) -> "RakeAlgorithm":
        """spaCy model for sentences and tags + Snowball stemmer."""
        return cls(
            config,
            splitter=SpacySentenceSplitter(model, auto_download=auto_download, log_fn=logger),
            tagger=SpacyPosTagger(model, auto_download=auto_download, log_fn=logger),
            stemmer=SnowballStemmer(),
            logger=logger,
        )

    # ------------------------------------------------------------------
    # Internal helper – unified logging
    # ------------------------------------------------------------------
    def _log(self, message: str, verbose: bool = True) -> None:
        if not verbose:
            return
        if self.logger is not None:
            self.logger(message)
        else:
            print(message)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def process(self, text: str, verbose: bool = False) -> Result:
        """
        Run RAKE on a single document.

        Returns a :class:`Result` whose keywords are in the order they were
        first identified in ``text``. Empty text, or text with no candidate
        phrases, gives an empty Result.

        Raises
        ------
        ContractViolation
            If the splitter or tagger break their interface.
        InternalInvariantError
            If scoring loses track of a word.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        tokens = normalize(text, self._splitter, self._tagger)
        self._log(f"[rapidrake] {len(tokens)} tokens", verbose)

        filtered = filter_tokens(tokens, self.config)
        candidates = segment(filtered, self.config, self.stemmer)
        self._log(f"[rapidrake] {len(candidates)} candidate phrases", verbose)

        result = assemble(score(candidates, self.config))
        self._log(
            f"[rapidrake] {len(set(result.full_keywords))} distinct keywords",
            verbose,
        )
        return result

    def process_many(self, texts: Iterable[str], verbose: bool = False) -> List[Result]:
        """Run :meth:`process` on each document independently."""
        results: List[Result] = []
        for doc_index, text in enumerate(texts):
            self._log(f"[rapidrake] document {doc_index}", verbose)
            results.append(self.process(text, verbose=verbose))
        return results

