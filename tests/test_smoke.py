from rapidrake import RakeAlgorithm, RakeConfiguration, RegexSentenceSplitter, Result
from rapidrake.smoke_test import SMOKE_STOP_WORDS, run_smoke_test

from conftest import LexiconTagger


def test_smoke_test_with_injected_algorithm(capsys):
    config = RakeConfiguration.minimal(stop_words=SMOKE_STOP_WORDS, min_word_length=3, stem=True)
    algorithm = RakeAlgorithm(config, RegexSentenceSplitter(), LexiconTagger())

    summary = run_smoke_test(verbose=False, algorithm=algorithm, top_n=3)

    assert capsys.readouterr().out == ""
    assert summary["config"] is config
    assert len(summary["results"]) == len(summary["docs"]) == 4
    assert all(isinstance(r, Result) for r in summary["results"])
    assert len(summary["results"][-1]) == 0
    assert all(len(top) <= 3 for top in summary["top"])
    assert "manual spreadsheet export" in summary["top"][2].full_keywords


def test_smoke_test_verbose_output(capsys):
    algorithm = RakeAlgorithm(RakeConfiguration.minimal(), RegexSentenceSplitter(), LexiconTagger())

    run_smoke_test(verbose=True, algorithm=algorithm)

    out = capsys.readouterr().out
    assert "[smoke_test] doc 3: (no keywords)" in out
    assert "completed successfully" in out
