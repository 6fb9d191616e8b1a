import pytest

from rapidrake import RakeAlgorithm, RakeConfiguration, SnowballStemmer


class WholeTextSplitter:
    """Treats the whole text as one sentence."""

    def split(self, text):
        return [text]


class LexiconTagger:
    """Tags tokens from a fixed lexicon, everything else as ``default``."""

    def __init__(self, lexicon=None, default="NN"):
        self.lexicon = dict(lexicon or {})
        self.default = default
        self.calls = []

    def tag(self, tokens):
        self.calls.append(list(tokens))
        return [self.lexicon.get(t, self.default) for t in tokens]


@pytest.fixture
def splitter():
    return WholeTextSplitter()


@pytest.fixture
def tagger():
    # Tags for the "I ran to the store" scenarios
    return LexiconTagger(
        {"i": "PRP", "ran": "VBD", "to": "TO", "the": "DT", "store": "NN"}
    )


@pytest.fixture
def stemmer():
    return SnowballStemmer()


@pytest.fixture
def minimal_config():
    return RakeConfiguration.minimal()


@pytest.fixture
def make_rake(splitter, tagger, stemmer):
    """Build a RakeAlgorithm over the fake collaborators."""

    def _make(**overrides):
        return RakeAlgorithm(
            RakeConfiguration.minimal(**overrides),
            splitter=splitter,
            tagger=tagger,
            stemmer=stemmer,
        )

    return _make
