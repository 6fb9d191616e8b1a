"""
backends.py

External collaborators for RAKE: sentence splitting, POS tagging and
stemming, plus the glue to load them from NLTK or spaCy.

The core pipeline only relies on three narrow interfaces:

    SentenceSplitter.split(text)      -> list of sentence strings
    PosTagger.tag(tokens)             -> one tag per token, same order
    Stemmer.stem(word, language)      -> stemmed word

Backends
--------
- NltkSentenceSplitter / NltkPosTagger  → Punkt + PerceptronTagger
- SpacySentenceSplitter / SpacyPosTagger → any spaCy pipeline
- RegexSentenceSplitter                 → no model, punctuation heuristic
- SnowballStemmer                       → NLTK Snowball stemmers

Statistical splitters and taggers keep internal scratch state and are not
safe to call from several threads at once. :func:`collaborator_lock` hands
out one lock per collaborator instance, and :class:`SerializedSplitter` /
:class:`SerializedTagger` hold that lock for the duration of a single
``split`` / ``tag`` call.
"""

from __future__ import annotations

import re
import threading
import weakref
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Set, Tuple, runtime_checkable

from .errors import ResourceLoadError


LogFn = Callable[[str], None]


# ---------------------------------------------------------------------------
# Collaborator interfaces
# ---------------------------------------------------------------------------


@runtime_checkable
class SentenceSplitter(Protocol):
    def split(self, text: str) -> List[str]:
        ...


@runtime_checkable
class PosTagger(Protocol):
    def tag(self, tokens: Sequence[str]) -> List[str]:
        ...


@runtime_checkable
class Stemmer(Protocol):
    def stem(self, word: str, language: str) -> str:
        ...


# ---------------------------------------------------------------------------
# Per-collaborator locks
# ---------------------------------------------------------------------------

_registry_guard = threading.RLock()
_weak_locks: "weakref.WeakKeyDictionary[Any, threading.Lock]" = weakref.WeakKeyDictionary()
# Objects that cannot be weak-referenced or hashed, keyed by id(): each entry
# is [collaborator, lock, live owner count] and is dropped with its last owner.
_strong_locks: Dict[int, List[Any]] = {}


def _release_strong_lock(key: int) -> None:
    with _registry_guard:
        entry = _strong_locks.get(key)
        if entry is None:
            return
        entry[2] -= 1
        if entry[2] <= 0:
            del _strong_locks[key]


def collaborator_lock(collaborator: Any, owner: Any = None) -> threading.Lock:
    """
    Return the process-wide lock associated with ``collaborator``.

    Every caller asking for the same instance gets the same lock, so two
    RakeAlgorithm objects sharing one tagger also serialize on it.

    Collaborators that cannot be weak-referenced are tracked by ``id()``
    only while at least one ``owner`` (a serialized wrapper) is alive; the
    entry is released when the last owner is garbage collected.
    """
    with _registry_guard:
        try:
            lock = _weak_locks.get(collaborator)
            if lock is None:
                lock = threading.Lock()
                _weak_locks[collaborator] = lock
            return lock
        except TypeError:
            key = id(collaborator)
            entry = _strong_locks.get(key)
            if entry is None:
                entry = [collaborator, threading.Lock(), 0]
                if owner is None:
                    return entry[1]
                _strong_locks[key] = entry
            if owner is not None:
                entry[2] += 1
                weakref.finalize(owner, _release_strong_lock, key)
            return entry[1]


class SerializedSplitter:
    """Wrap a SentenceSplitter so each ``split`` call holds its lock."""

    def __init__(self, splitter: SentenceSplitter) -> None:
        self.wrapped = splitter
        self.lock = collaborator_lock(splitter, owner=self)

    def split(self, text: str) -> List[str]:
        with self.lock:
            return self.wrapped.split(text)


class SerializedTagger:
    """Wrap a PosTagger so each ``tag`` call holds its lock."""

    def __init__(self, tagger: PosTagger) -> None:
        self.wrapped = tagger
        self.lock = collaborator_lock(tagger, owner=self)

    def tag(self, tokens: Sequence[str]) -> List[str]:
        with self.lock:
            return self.wrapped.tag(tokens)


# ---------------------------------------------------------------------------
# Dependency-free splitter
# ---------------------------------------------------------------------------


class RegexSentenceSplitter:
    """
    Split after ``.``, ``!`` or ``?`` when followed by whitespace and an
    upper-case letter or digit.

    Fast and always available, but naive about abbreviations. Sentences are
    returned as-is (no trimming, no filtering).
    """

    _SENT_SPLIT = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9])")

    def split(self, text: str) -> List[str]:
        return self._SENT_SPLIT.split(text)


# ---------------------------------------------------------------------------
# NLTK backends
# ---------------------------------------------------------------------------


def _load_nltk_resource(
    factory: Callable[[], Any],
    resource: str,
    auto_download: bool,
    log: LogFn,
) -> Any:
    """
    Build an NLTK object, downloading ``resource`` once if it is missing.

    NLTK signals missing data with ``LookupError``; anything that still
    fails after the download attempt becomes a ResourceLoadError.
    """
    import nltk

    try:
        return factory()
    except LookupError as e:
        if not auto_download:
            raise ResourceLoadError(
                f"NLTK resource '{resource}' is not installed. "
                f"Install with: python -m nltk.downloader {resource}"
            ) from e

    log(f"[rapidrake] NLTK resource '{resource}' not found. Downloading…")
    nltk.download(resource, quiet=True)

    try:
        return factory()
    except LookupError as e:
        raise ResourceLoadError(f"Could not load NLTK resource '{resource}'") from e


class NltkSentenceSplitter:
    """Punkt sentence splitter (``punkt_tab`` data)."""

    def __init__(
        self,
        language: str = "english",
        auto_download: bool = True,
        log_fn: Optional[LogFn] = None,
    ) -> None:
        from nltk.tokenize.punkt import PunktTokenizer

        self.language = language
        self._tokenizer = _load_nltk_resource(
            lambda: PunktTokenizer(language),
            "punkt_tab",
            auto_download,
            log_fn or print,
        )

    def split(self, text: str) -> List[str]:
        return self._tokenizer.tokenize(text)


class NltkPosTagger:
    """NLTK averaged perceptron tagger (Penn Treebank tags)."""

    def __init__(self, auto_download: bool = True, log_fn: Optional[LogFn] = None) -> None:
        from nltk.tag import PerceptronTagger

        self._tagger = _load_nltk_resource(
            PerceptronTagger,
            "averaged_perceptron_tagger_eng",
            auto_download,
            log_fn or print,
        )

    def tag(self, tokens: Sequence[str]) -> List[str]:
        return [t for _, t in self._tagger.tag(list(tokens))]


class SnowballStemmer:
    """
    NLTK Snowball stemmers, one cached instance per language.

    ``stem`` is safe to call from several threads: the cache is guarded and
    the stemmers themselves hold no per-call state.
    """

    def __init__(self) -> None:
        self._stemmers: Dict[str, Any] = {}
        self._guard = threading.Lock()

    @staticmethod
    def languages() -> Tuple[str, ...]:
        from nltk.stem.snowball import SnowballStemmer as _Snowball

        return tuple(_Snowball.languages)

    def check_language(self, language: str) -> None:
        """Raise ResourceLoadError unless ``language`` has a Snowball stemmer."""
        self._get(language)

    def stem(self, word: str, language: str) -> str:
        return self._get(language).stem(word)

    def _get(self, language: str) -> Any:
        with self._guard:
            stemmer = self._stemmers.get(language)
            if stemmer is None:
                from nltk.stem.snowball import SnowballStemmer as _Snowball

                try:
                    stemmer = _Snowball(language)
                except ValueError as e:
                    raise ResourceLoadError(
                        f"No Snowball stemmer for language {language!r}. "
                        f"Supported: {', '.join(_Snowball.languages)}"
                    ) from e
                self._stemmers[language] = stemmer
            return stemmer


# ---------------------------------------------------------------------------
# spaCy backends
# ---------------------------------------------------------------------------


def load_spacy_model(model_name: str, auto_download: bool = True, log_fn: Optional[LogFn] = None, **kwargs: Any):
    """
    Load a spaCy model, downloading it on-the-fly if necessary.

    Extra keyword arguments (``exclude=[...]`` etc.) go to ``spacy.load``.
    """
    import subprocess
    import sys

    log = log_fn or print
    try:
        import spacy
    except ImportError as e:
        raise ResourceLoadError(
            "spaCy is required for the spaCy backends. Install with 'pip install spacy'."
        ) from e

    try:
        return spacy.load(model_name, **kwargs)
    except OSError as e:
        if not auto_download:
            raise ResourceLoadError(f"spaCy model '{model_name}' is not installed") from e

    # Model not downloaded yet → auto-download.
    log(f"[rapidrake] spaCy model '{model_name}' not found. Downloading…")
    try:
        subprocess.run([sys.executable, "-m", "spacy", "download", model_name], check=True)
        return spacy.load(model_name, **kwargs)
    except (OSError, subprocess.CalledProcessError) as e:
        raise ResourceLoadError(f"Could not load spaCy model '{model_name}'") from e


class SpacySentenceSplitter:
    """
    Sentence splitting with spaCy.

    With ``model=None`` a blank pipeline plus the rule-based
    ``sentencizer`` is used (no model download required).
    """

    def __init__(
        self,
        model: Optional[str] = None,
        lang: str = "en",
        auto_download: bool = True,
        log_fn: Optional[LogFn] = None,
    ) -> None:
        if model is None:
            try:
                import spacy

                self._nlp = spacy.blank(lang)
            except (ImportError, ValueError) as e:
                raise ResourceLoadError(f"Could not create blank spaCy pipeline for {lang!r}") from e
            self._nlp.add_pipe("sentencizer")
        else:
            self._nlp = load_spacy_model(
                model,
                auto_download=auto_download,
                log_fn=log_fn,
                exclude=["ner", "lemmatizer"],
            )

    def split(self, text: str) -> List[str]:
        return [sent.text for sent in self._nlp(text).sents]


class SpacyPosTagger:
    """
    Tag pre-tokenized text with a spaCy pipeline.

    The tokens are wrapped in a ``Doc`` as given (spaCy's own tokenizer is
    bypassed) so tags line up one-to-one with the input. Returns the
    fine-grained ``tag_`` values (Penn Treebank for English models).
    """

    def __init__(
        self,
        model: str = "en_core_web_sm",
        auto_download: bool = True,
        log_fn: Optional[LogFn] = None,
    ) -> None:
        self._nlp = load_spacy_model(
            model,
            auto_download=auto_download,
            log_fn=log_fn,
            exclude=["parser", "ner", "lemmatizer"],
        )

    def tag(self, tokens: Sequence[str]) -> List[str]:
        from spacy.tokens import Doc

        doc = Doc(self._nlp.vocab, words=list(tokens))
        for _, component in self._nlp.pipeline:
            doc = component(doc)
        return [token.tag_ for token in doc]


# ---------------------------------------------------------------------------
# Stop words
# ---------------------------------------------------------------------------


def load_stop_words(
    source: str = "nltk",
    language: str = "english",
    auto_download: bool = True,
    log_fn: Optional[LogFn] = None,
) -> Set[str]:
    """
    Load a stop-word list.

    Parameters
    ----------
    source:
        ``"nltk"`` (stopwords corpus, ``language`` like ``"english"``) or
        ``"spacy"`` (language defaults, ``language`` like ``"en"``).
    """
    if source == "nltk":
        from nltk.corpus import stopwords

        def _words() -> List[str]:
            try:
                return stopwords.words(language)
            except OSError as e:
                raise ResourceLoadError(f"NLTK has no stop words for {language!r}") from e

        words = _load_nltk_resource(_words, "stopwords", auto_download, log_fn or print)
    elif source == "spacy":
        try:
            import spacy

            words = spacy.blank(language).Defaults.stop_words
        except (ImportError, ValueError) as e:
            raise ResourceLoadError(f"Could not load spaCy stop words for {language!r}") from e
    else:
        raise ValueError("source must be 'nltk' or 'spacy'")

    return {w.strip().lower() for w in words if w.strip()}
