from pathlib import Path

import pytest
from spellingbee.datasets import validate_wordlist, pretty_summary, open_wordlist, read_lines, write_lines
from spellingbee.errors import WordlistNotFound, WordlistIsDirectory


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    wl = tmp_path / "wordlist.txt"
    _write(wl, ["dog", "god", "good"])

    rep = validate_wordlist(str(wl))
    assert rep["passed"] is True
    assert rep["unique_words"] == 3 and rep["lines"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    wl = tmp_path / "wordlist.txt"
    wl.write_text("dog\n\nDog\ndog\nice-cream\n", encoding="utf-8")

    rep = validate_wordlist(wl)
    assert rep["passed"] is False
    assert rep["blank_lines"] == 1
    assert rep["duplicate_lines"] == 1
    assert rep["non_lower_alpha"] == 2
    assert rep["unique_words"] == 3
    assert any("duplicate" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_missing_and_directory(tmp_path: Path):
    rep = validate_wordlist(tmp_path / "nope.txt")
    assert rep["exists"] is False and rep["passed"] is False
    assert "not found" in pretty_summary(rep)

    rep = validate_wordlist(tmp_path)
    assert rep["is_dir"] is True and rep["passed"] is False
    assert "directory" in pretty_summary(rep)


def test_open_wordlist_streams_and_checks_path(tmp_path: Path):
    wl = tmp_path / "wordlist.txt"
    _write(wl, ["dog", "god"])
    with open_wordlist(wl) as f:
        assert [ln.rstrip("\n") for ln in f] == ["dog", "god"]
    assert f.closed

    with pytest.raises(WordlistNotFound):
        with open_wordlist(tmp_path / "nope.txt"):
            pass
    with pytest.raises(WordlistIsDirectory):
        with open_wordlist(tmp_path):
            pass


def test_read_write_lines(tmp_path: Path):
    out = tmp_path / "sub" / "words.txt"
    assert write_lines(["dog", "god"], out) == str(out)
    assert out.read_text(encoding="utf-8") == "dog\ngod\n"
    assert read_lines(out) == ["dog", "god"]


def test_open_wordlist_closes_handle_when_scan_fails(tmp_path: Path):
    wl = tmp_path / "wordlist.txt"
    _write(wl, ["dog", "god", "good"])

    with pytest.raises(RuntimeError):
        with open_wordlist(wl) as f:
            for ln in f:
                if ln.startswith("god"):
                    raise RuntimeError("scan aborted")
    assert f.closed
