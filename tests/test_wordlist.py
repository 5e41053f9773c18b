import pytest

from cipher_tools.wordlist import DEFAULT_WORDLIST_PATH, WordList, load_word_list


def test_lookup_is_case_insensitive():
    words = WordList(["Hello", "world "])
    assert words.contains("hello")
    assert words.contains("HELLO")
    assert "World" in words
    assert "planet" not in words
    assert 42 not in words


def test_blank_entries_are_dropped():
    assert len(WordList(["", "  ", "a", "a", "A"])) == 1


def test_from_text_skips_comments():
    words = WordList.from_text("# a comment\nalpha\n\n  beta  \n#gamma\n")
    assert len(words) == 2
    assert "beta" in words
    assert "gamma" not in words


def test_bundled_corpus_loads():
    words = load_word_list()
    assert len(words) > 500
    for w in ("the", "quick", "brown", "fox", "attack", "dawn"):
        assert w in words
    assert "#" not in words


def test_load_from_path(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")
    assert len(load_word_list(str(path))) == 2


def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.txt"))


def test_default_path_points_at_bundled_data():
    assert DEFAULT_WORDLIST_PATH.endswith("english_words.txt")
