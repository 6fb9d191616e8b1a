"""
errors.py

Exception hierarchy for rapidrake.

- ResourceLoadError      → a model / corpus / stemmer failed to initialize
- ContractViolation      → an external collaborator broke its contract
- InternalInvariantError → the scoring pass lost track of a word
"""

from __future__ import annotations


class RakeError(Exception):
    """Base class for all rapidrake errors."""


class ResourceLoadError(RakeError):
    """
    An external model or resource could not be initialized.

    Raised while constructing backends or a RakeAlgorithm, never while
    scoring a document.
    """


class ContractViolation(RakeError):
    """
    An external collaborator (sentence splitter, tagger) returned output
    that does not honour its interface, e.g. a tag list whose length
    differs from the token list it was given.
    """


class InternalInvariantError(RakeError):
    """A word expected in the frequency/score tables was missing."""
