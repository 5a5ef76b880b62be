from pathlib import Path

from script.clean_wordlist import main, dedupe_words, order_words


def test_dedupe_words_first_spelling_wins():
    assert dedupe_words(["god", "dog", "god", "good"]) == ["god", "dog", "good"]
    assert dedupe_words(["Dog", "dog"]) == ["Dog", "dog"]
    assert dedupe_words(["Dog", "dog"], fold_case=True) == ["Dog"]


def test_order_words():
    words = ["good", "dog", "god"]
    assert order_words(words, "input") == words
    assert order_words(words, "alpha") == ["dog", "god", "good"]
    assert order_words(words, "length") == ["good", "dog", "god"]


def test_clean_in_place(tmp_path: Path, capsys):
    wl = tmp_path / "wordlist.txt"
    wl.write_text("god\nDog \n\ndog\n  \ngod\nice-cream\n", encoding="utf-8")

    main(["--in", str(wl), "--lower", "--alpha-only", "--sort", "alpha"])
    assert wl.read_text(encoding="utf-8") == "dog\ngod\n"
    assert "2 distinct" in capsys.readouterr().out


def test_clean_to_out_keeps_input_order(tmp_path: Path):
    wl = tmp_path / "wordlist.txt"
    out = tmp_path / "clean.txt"
    wl.write_text("god\ndog\ngod\n", encoding="utf-8")

    main(["--in", str(wl), "--out", str(out)])
    assert out.read_text(encoding="utf-8") == "god\ndog\n"
    assert wl.read_text(encoding="utf-8") == "god\ndog\ngod\n"
