from __future__ import annotations

from pathlib import Path

import pytest
import requests

from config.config import Config, validate_config
from config.logging_config import setup_logging
from oncobase import remote_listing
from oncobase.articles import Article
from oncobase.cooccurrence import CooccurrenceAggregator
from oncobase.dictionary import MedicalDictionary
from oncobase.pipeline import OncobasePipeline, build_parser, main
from oncobase.report import SEPARATOR, render_report


def test_end_to_end_scenario(scenario_corpus, scenario_dictionary):
    pipeline = OncobasePipeline(MedicalDictionary.load(scenario_dictionary))
    aggregator = pipeline.run(scenario_corpus)

    assert aggregator is pipeline.aggregator
    assert aggregator.total == 3
    assert aggregator.qualifying == 1
    assert aggregator.totals == {"cancer": 5, "breast": 4}
    assert aggregator.cooccurrence("cancer", "breast") == 1
    assert aggregator.cooccurrence("breast", "cancer") == 1
    assert aggregator.cooccurrence("breast", "breast") == 1
    assert aggregator.cooccurrence("cancer", "lung") == 0


def test_anchor_is_tested_on_filtered_words_not_raw_text():
    pipeline = OncobasePipeline(MedicalDictionary(["cancer", "lung"]))

    assert pipeline.process_text("cancer " + "lung " * 9) == [("lung", 9)]
    assert pipeline.aggregator.qualifying == 0
    assert pipeline.aggregator.total == 1


def test_filtered_distribution_is_count_descending():
    pipeline = OncobasePipeline(MedicalDictionary(["cancer", "lung", "serum"]))
    text = "serum " * 4 + "cancer " * 6 + "lung " * 5

    assert pipeline.process_text(text) == [("cancer", 6), ("lung", 5), ("serum", 4)]


def test_unreadable_article_still_counts_toward_total(make_corpus, scenario_dictionary):
    root = make_corpus({"ok.txt": "cancer " * 4, "bad.txt": b"\xff\xfe cancer"})
    aggregator = OncobasePipeline(MedicalDictionary.load(scenario_dictionary)).run(root)

    assert (aggregator.total, aggregator.qualifying) == (2, 1)


def test_process_article_uses_loaded_text(make_corpus):
    root = make_corpus({"one.txt": "cancer " * 5})
    pipeline = OncobasePipeline(MedicalDictionary(["cancer"]), vocabulary=("cancer",))

    assert pipeline.process_article(Article(root / "one.txt").load()) == [("cancer", 5)]
    assert pipeline.aggregator.cooccurrence("cancer", "cancer") == 1


def test_run_on_missing_corpus_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        OncobasePipeline(MedicalDictionary()).run(tmp_path / "missing")


def test_render_report_layout():
    aggregator = CooccurrenceAggregator(("cancer", "breast"))
    aggregator.fold([("cancer", 5), ("breast", 4)])
    aggregator.fold([])

    lines = render_report(aggregator).splitlines()
    assert lines == [
        SEPARATOR,
        "breast 4",
        "cancer 5",
        SEPARATOR,
        "1 2",
        SEPARATOR,
        "cancer cancer 1",
        "cancer breast 1",
        "breast cancer 1",
        "breast breast 1",
    ]


def test_main_prints_report(scenario_corpus, scenario_dictionary, capsys):
    status = main([str(scenario_corpus), str(scenario_dictionary), "--log-level", "warning"])
    out = capsys.readouterr().out.splitlines()

    assert status == 0
    assert "cancer 5" in out
    assert "breast 4" in out
    assert "1 3" in out
    assert "cancer breast 1" in out
    assert "renal renal 0" in out
    assert len([line for line in out if line.startswith("cancer ")]) == 1 + len(Config.VOCABULARY)


def test_main_reports_missing_corpus(tmp_path: Path, scenario_dictionary):
    status = main([str(tmp_path / "missing"), str(scenario_dictionary), "--log-level", "ERROR"])
    assert status == 1


def test_main_rejects_negative_min_count(scenario_corpus, scenario_dictionary):
    assert main([str(scenario_corpus), str(scenario_dictionary), "--min-count", "-1"]) == 1


def test_main_refreshes_corpus_before_scanning(monkeypatch, tmp_path: Path, scenario_dictionary, capsys):
    base = "https://mirror.example.org/pub/"
    body = ("cancer " * 4 + "breast " * 4).encode()
    listing = f'  2016 Jan 05 12:00  File   <a href="{base}paper.txt">paper.txt</a>  ({len(body)} bytes)'

    class Response:
        def __init__(self, data: bytes):
            self.data = data
            self.text = data.decode()

        def raise_for_status(self):
            pass

        def iter_content(self, chunk_size=1):
            yield self.data

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

    routes = {base: Response(listing.encode()), f"{base}paper.txt": Response(body)}
    monkeypatch.setattr(remote_listing.requests, "get", lambda url, **kw: routes[url])

    corpus = tmp_path / "fresh"
    status = main([str(corpus), str(scenario_dictionary), "--refresh", base, "--log-level", "WARNING"])

    assert status == 0
    assert (corpus / "paper.txt").read_bytes() == body
    assert "1 1" in capsys.readouterr().out.splitlines()


def test_main_reports_unreachable_listing(monkeypatch, tmp_path: Path, scenario_dictionary):
    def refuse(url, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(remote_listing.requests, "get", refuse)
    status = main([str(tmp_path / "c"), str(scenario_dictionary), "--refresh", "https://x.invalid/"])
    assert status == 1


def test_parser_normalizes_options():
    args = build_parser().parse_args(["--extensions", "txt", ".nxml", "--log-level", "debug"])

    assert args.extensions == ["txt", ".nxml"]
    assert args.log_level == "DEBUG"
    assert args.min_count == Config.MIN_WORD_COUNT


def test_main_accepts_extensions_without_dot(make_corpus, scenario_dictionary, capsys):
    root = make_corpus({"paper.nxml": "cancer " * 5})
    assert main([str(root), str(scenario_dictionary), "--extensions", "nxml", "--log-level", "ERROR"]) == 0
    assert "1 1" in capsys.readouterr().out.splitlines()


def test_config_is_consistent():
    validate_config()
    assert Config.VOCABULARY[0] == Config.ANCHOR_TERM
    with pytest.raises(ValueError):
        setup_logging(log_level="LOUD")


def test_main_rejects_unsupported_extensions(make_corpus, scenario_dictionary, capsys):
    root = make_corpus({"paper.md": "cancer " * 5})

    assert main([str(root), str(scenario_dictionary), "--extensions", ".md"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert ".md" in captured.err


def test_main_keeps_logs_out_of_the_report(scenario_corpus, scenario_dictionary, capsys):
    assert main([str(scenario_corpus), str(scenario_dictionary), "--log-level", "INFO"]) == 0
    captured = capsys.readouterr()

    assert captured.out.startswith(SEPARATOR)
    assert "Scan done" not in captured.out
    assert "Scan done" in captured.err
