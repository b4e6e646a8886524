"""Integration tests for the learn-search command line

Runs main() against a temporary corpus and checks the printed report,
warnings and exit codes.

To run: pytest tests/integration/test_cli_end_to_end.py -v
"""

import pytest

from corpus_factory import write_keywords
from learn_search.main import build_parser, main


# Mark all tests in this file as integration tests
pytestmark = pytest.mark.integration


@pytest.fixture
def repo(basics_corpus, monkeypatch):
    """basics corpus configured as LEARN_REPO_ROOT"""
    monkeypatch.setenv("LEARN_REPO_ROOT", str(basics_corpus))
    return basics_corpus


@pytest.fixture
def keywords(tmp_path):
    return write_keywords(tmp_path / "keywords.csv", [
        "basics,1.0,error",
        "basics,2.0,warn",
        "unused,1.0,kubernetes",
    ])


def test_end_to_end_ranking(repo, keywords, capsys):
    """Intro (3×1 + 1×2 = 5) ranks before Advanced (2×2 = 4)"""
    exit_code = main(["-f", str(keywords)])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out[:11] == [
        "basics",
        "  Option 1:",
        "    title: Intro",
        "    score: 5",
        "    url:   https://docs.microsoft.com/learn/modules/intro/",
        f"    path:  {repo / 'intro'}",
        "  Option 2:",
        "    title: Advanced",
        "    score: 4",
        "    url:   https://docs.microsoft.com/learn/modules/advanced/",
        f"    path:  {repo / 'advanced'}",
    ]
    assert out[11:] == ["", "unused", "  No hits", ""]


def test_topic_filter(repo, keywords, capsys):
    """Only the requested topic is reported"""
    exit_code = main(["-f", str(keywords), "-t", "unused"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out == ["unused", "  No hits", ""]


def test_verbose_raw_hits(repo, keywords, capsys):
    exit_code = main(["--file", str(keywords), "--topic", "basics", "--verbose"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "  Raw hits:" in out
    assert "    Keyword 'warn' (weight=2):" in out
    assert "/advanced/1-deep-dive/ (2 occurrences)" in out


def test_workers_do_not_change_report(repo, keywords, capsys, monkeypatch):
    main(["-f", str(keywords), "-v"])
    sequential = capsys.readouterr().out

    monkeypatch.setenv("LEARN_SEARCH_WORKERS", "3")
    main(["-f", str(keywords), "-v"])
    parallel = capsys.readouterr().out

    assert parallel == sequential


def test_malformed_rows_warn_but_succeed(repo, tmp_path, capsys):
    path = write_keywords(tmp_path / "bad.csv", [
        "basics,1.0,error",
        "mytopic,notanumber,foo",
        "mytopic,1.0,(broken",
        "mytopic,1.0,warn",
    ])

    exit_code = main(["-f", str(path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Error processing topic 'mytopic', line 2" in captured.err
    assert "Error processing topic 'mytopic', line 3" in captured.err
    assert "mytopic\n  Option 1:\n    title: Advanced" in captured.out


def test_missing_keyword_file_is_fatal(repo, tmp_path, capsys):
    exit_code = main(["-f", str(tmp_path / "missing.csv")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "missing.csv" in captured.err


def test_missing_corpus_root_is_fatal(keywords, tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("LEARN_REPO_ROOT", str(tmp_path / "no-such-repo"))

    exit_code = main(["-f", str(keywords)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "no-such-repo" in captured.err


def test_unreadable_unit_skipped(repo, keywords, capsys):
    """A unit that cannot be decoded is skipped; the rest of the corpus is reported"""
    (repo / "intro" / "includes" / "1-introduction.md").write_bytes(b"error \xff\xfe error\n")

    exit_code = main(["-f", str(keywords), "-t", "basics"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "1-introduction.md" in captured.err
    assert "basics\n  Option 1:\n    title: Advanced\n    score: 4" in captured.out


def test_env_file_configures_base_url(repo, keywords, capsys, isolated_run):
    (isolated_run / ".env").write_text("LEARN_BASE_URL=https://learn.example.com/m\n")

    main(["-f", str(keywords), "-t", "basics"])

    assert "url:   https://learn.example.com/m/intro/" in capsys.readouterr().out


def test_file_flag_required(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
