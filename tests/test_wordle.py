import itertools

import pytest

from puzzlebox.wordle import (
    PREFERRED_LETTERS,
    find_inen_words,
    five_letter_words,
    format_frequency,
    is_valid_pair,
    letter_frequency,
    main,
    pair_score,
    top_pairs,
)

WORDS = ["crane", "moist", "plumb", "fight", "dowry", "jazzy", "slate", "brick", "nymph"]


def test_five_letter_words_keeps_order():
    assert five_letter_words(["apple", "pie", "crane", "bananas"]) == ["apple", "crane"]


def test_letter_frequency_counts_case_insensitively():
    result = letter_frequency(["Abba", "a1-"])
    assert dict(result) == {"a": 3, "b": 2}
    assert [letter for letter, _ in result] == ["a", "b"]


def test_letter_frequency_ties_alphabetical():
    result = letter_frequency(["cab"])
    assert result == [("a", 1), ("b", 1), ("c", 1)]


def test_format_frequency():
    assert format_frequency([("a", 1), ("b", 1)]) == "ab\na: 1 (50%)\nb: 1 (50%)\n"


def test_format_frequency_header_matches_order():
    counts = letter_frequency(WORDS)
    text = format_frequency(counts)
    lines = text.splitlines()
    assert lines[0] == "".join(letter for letter, _ in counts)
    assert len(lines) == len(counts) + 1


def test_find_inen_words():
    lines = [
        "linen l IH1 N AH0 N\n",
        "pinene p AY1 N IY0 N\n",
        "crane k R EY1 N\n",
    ]
    assert find_inen_words(lines) == [("pinene", "p AY1 N IY0 N")]


def test_find_inen_words_without_space_uses_whole_line():
    assert find_inen_words(["kinen"]) == [("kinen", "kinen")]


@pytest.mark.parametrize(
    "word1, word2, expected",
    [
        ("crane", "moist", True),
        ("cranes", "moist", False),
        ("crane", "boats", False),
        ("crane", "trace", False),
        ("eerie", "moist", False),
        ("crane", "jazzy", False),
    ],
)
def test_is_valid_pair(word1, word2, expected):
    assert is_valid_pair(word1, word2) is expected


def test_pair_score_extremes():
    assert pair_score(PREFERRED_LETTERS[0], "") == len(PREFERRED_LETTERS)
    assert pair_score("", PREFERRED_LETTERS[-1]) == 1
    assert pair_score("", "") == 0


def test_pair_score_symmetric_and_ordered():
    assert pair_score("crane", "moist") == pair_score("moist", "crane")
    assert pair_score("aesor", "iltnu") > pair_score("zjxqk", "fwvyb")


def test_top_pairs_invariants():
    result = top_pairs(WORDS, 3)
    assert len(result) == 3
    for w1, w2, score in result:
        assert is_valid_pair(w1, w2)
        assert score == pair_score(w1, w2)
        assert WORDS.index(w1) < WORDS.index(w2)
    valid_scores = [
        pair_score(a, b) for a, b in itertools.combinations(WORDS, 2) if is_valid_pair(a, b)
    ]
    assert max(valid_scores) in [score for _, _, score in result]


def test_top_pairs_keeps_all_when_under_limit():
    valid = [(a, b) for a, b in itertools.combinations(WORDS, 2) if is_valid_pair(a, b)]
    result = top_pairs(WORDS, len(valid) + 5)
    assert [(a, b) for a, b, _ in result] == valid


def test_top_pairs_rejects_bad_limit():
    with pytest.raises(ValueError):
        top_pairs(WORDS, 0)


def test_main_fives(tmp_path, capsys):
    source = tmp_path / "alpha.txt"
    target = tmp_path / "five.txt"
    source.write_text("apple pie\ncrane\nbananas\n")
    assert main(["fives", "--input", str(source), "--output", str(target)]) == 0
    assert target.read_text().split() == ["apple", "crane"]
    assert str(target) in capsys.readouterr().out


def test_main_fives_missing_input(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    out = tmp_path / "out.txt"
    assert main(["fives", "--input", str(missing), "--output", str(out)]) == 1
    assert "Failed to open input file." in capsys.readouterr().err


def test_main_frequency(tmp_path):
    source = tmp_path / "five.txt"
    target = tmp_path / "freq.txt"
    source.write_text("crane moist\n")
    assert main(["frequency", "--input", str(source), "--output", str(target)]) == 0
    expected = format_frequency(letter_frequency(["crane", "moist"]))
    assert target.read_text() == expected


def test_main_inen(tmp_path, capsys):
    source = tmp_path / "dict.txt"
    target = tmp_path / "nen.txt"
    source.write_text("linen l IH1 N AH0 N\npinene p AY1 N IY0 N\n")
    assert main(["inen", "--input", str(source), "--output", str(target)]) == 0
    assert target.read_text() == "pinene (p AY1 N IY0 N)\n"
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "Done!"


def test_main_starters(tmp_path, capsys):
    source = tmp_path / "five.txt"
    target = tmp_path / "best.txt"
    source.write_text("\n".join(WORDS))
    args = ["starters", "--input", str(source), "--output", str(target), "--limit", "2"]
    assert main(args) == 0
    expected = [f"{a} {b} with score {s}" for a, b, s in top_pairs(WORDS, 2)]
    assert target.read_text().splitlines() == expected
    out = capsys.readouterr().out
    assert "Top 2 pairs:" in out
    assert "New top pair: " in out