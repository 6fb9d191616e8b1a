"""
rapidrake

Rapid Automatic Keyword Extraction (RAKE) with pluggable sentence
splitting, POS tagging and stemming.

High-level API
--------------
- RakeConfiguration  → immutable RAKE parameters
- RakeAlgorithm      → run RAKE on a document, get a Result
- Result             → parallel keyword / stem / score sequences
- Backends:
    * NltkSentenceSplitter, NltkPosTagger
    * SpacySentenceSplitter, SpacyPosTagger
    * RegexSentenceSplitter, SnowballStemmer
    * load_stop_words
"""

from importlib.metadata import PackageNotFoundError, version


# Core APIs
from .config import (
    DEFAULT_PHRASE_DELIMITERS,
    VERB_TAGS,
    RakeConfiguration,
)
from .candidates import CandidatePhrase, Token
from .result import Result
from .rake import RakeAlgorithm
from .errors import (
    ContractViolation,
    InternalInvariantError,
    RakeError,
    ResourceLoadError,
)

# External collaborators
from .backends import (
    NltkPosTagger,
    NltkSentenceSplitter,
    PosTagger,
    RegexSentenceSplitter,
    SentenceSplitter,
    SnowballStemmer,
    SpacyPosTagger,
    SpacySentenceSplitter,
    Stemmer,
    load_stop_words,
)


# ---------------------------------------------------------------------
# Runtime version (single source of truth = pyproject.toml)
# ---------------------------------------------------------------------
try:
    __version__ = version("rapidrake")
except PackageNotFoundError:
    # Fallback when running directly from a clone without installation
    __version__ = "0.0.0"

__all__ = [
    "RakeConfiguration",
    "DEFAULT_PHRASE_DELIMITERS",
    "VERB_TAGS",
    "RakeAlgorithm",
    "Result",
    "Token",
    "CandidatePhrase",
    "RakeError",
    "ResourceLoadError",
    "ContractViolation",
    "InternalInvariantError",
    "SentenceSplitter",
    "PosTagger",
    "Stemmer",
    "NltkSentenceSplitter",
    "NltkPosTagger",
    "SpacySentenceSplitter",
    "SpacyPosTagger",
    "RegexSentenceSplitter",
    "SnowballStemmer",
    "load_stop_words",
    "__version__",
]
