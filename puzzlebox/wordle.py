"""Word-list tools for choosing Wordle starting words."""

from __future__ import annotations

import argparse
import string
import sys
from collections import Counter
from collections.abc import Callable, Iterable

PREFERRED_LETTERS = "aesoriltnudcymphbgkfwvzjxq"

_SKIP_PRONUNCIATIONS = ("IH1 N AH0 N", "IH0 N AH0 N")

Pair = tuple[str, str, int]


def five_letter_words(words: Iterable[str]) -> list[str]:
    """Return the words that are exactly five characters long, in order."""
    return [word for word in words if len(word) == 5]


def letter_frequency(words: Iterable[str]) -> list[tuple[str, int]]:
    """Count ASCII letters (case-folded) over all words.

    Returns (letter, count) pairs, most frequent first; ties stay in
    alphabetical order.
    """
    counts: Counter[str] = Counter(
        ch.lower() for word in words for ch in word if ch in string.ascii_letters
    )
    alphabetical = sorted(counts.items())
    return sorted(alphabetical, key=lambda item: item[1], reverse=True)


def format_frequency(counts: Iterable[tuple[str, int]]) -> str:
    """Render letter counts: the letters in order, then one line per letter with its share."""
    counts = list(counts)
    total = sum(count for _, count in counts)
    lines = ["".join(letter for letter, _ in counts)]
    for letter, count in counts:
        percentage = count / total * 100
        lines.append(f"{letter}: {count} ({percentage:g}%)")
    return "\n".join(lines) + "\n"


def find_inen_words(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Return (word, pronunciation) for dictionary lines whose word contains
    "inen" but is not pronounced like the ending of "linen".

    Each line holds a word, a space, then its pronunciation.
    """
    found = []
    for line in lines:
        line = line.rstrip("\r\n")
        word, sep, pronunciation = line.partition(" ")
        if not sep:
            pronunciation = line
        if "inen" in word and not any(p in pronunciation for p in _SKIP_PRONUNCIATIONS):
            found.append((word, pronunciation))
    return found


def _has_duplicates(word: str) -> bool:
    return len(set(word)) != len(word)


def is_valid_pair(word1: str, word2: str) -> bool:
    """True if neither word ends in 's', they share no letter, and neither repeats a letter."""
    if word1.endswith("s") or word2.endswith("s"):
        return False
    if not set(word1).isdisjoint(word2):
        return False
    return not (_has_duplicates(word1) or _has_duplicates(word2))


def _word_score(word: str) -> int:
    size = len(PREFERRED_LETTERS)
    return sum(size - i for i, letter in enumerate(PREFERRED_LETTERS) if letter in word)


def pair_score(word1: str, word2: str) -> int:
    """Score a pair by how common its letters are; rarer letters weigh less."""
    return _word_score(word1) + _word_score(word2)


def _scan(
    words: Iterable[str], limit: int, on_new: Callable[[Pair], None] | None = None
) -> list[Pair]:
    if limit < 1:
        raise ValueError("limit must be at least 1")
    prepared = [
        (word, frozenset(word), _word_score(word))
        for word in words
        if not word.endswith("s") and not _has_duplicates(word)
    ]
    top: list[Pair] = []
    lowest = 0
    for i, (word1, letters1, score1) in enumerate(prepared):
        for word2, letters2, score2 in prepared[i + 1:]:
            if not letters1.isdisjoint(letters2):
                continue
            score = score1 + score2
            entry = (word1, word2, score)
            if len(top) < limit:
                top.append(entry)
            elif score > top[lowest][2]:
                top[lowest] = entry
            else:
                continue
            lowest = min(range(len(top)), key=lambda k: top[k][2])
            if on_new is not None:
                on_new(entry)
    return top


def top_pairs(words: Iterable[str], limit: int = 10) -> list[Pair]:
    """Return up to ``limit`` best-scoring valid word pairs as (word1, word2, score).

    Pairs are considered in list order; once the list is full, a new pair
    replaces the first lowest-scoring entry only if it scores higher.
    """
    return _scan(words, limit)


def _read_words(path: str) -> list[str]:
    with open(path, encoding="utf-8", errors="replace") as handle:
        return handle.read().split()


def _write_lines(path: str, lines: Iterable[str]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        for line in lines:
            handle.write(line + "\n")


def _cmd_fives(args: argparse.Namespace) -> int:
    try:
        words = _read_words(args.input)
    except OSError:
        print("Failed to open input file.", file=sys.stderr)
        return 1
    try:
        _write_lines(args.output, five_letter_words(words))
    except OSError:
        print("Failed to open output file.", file=sys.stderr)
        return 1
    print(f"Five-letter words have been written to {args.output}.")
    return 0


def _cmd_frequency(args: argparse.Namespace) -> int:
    try:
        words = _read_words(args.input)
    except OSError:
        print("Failed to open input file.", file=sys.stderr)
        return 1
    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(format_frequency(letter_frequency(words)))
    except OSError:
        print("Failed to open output file.", file=sys.stderr)
        return 1
    return 0


def _cmd_inen(args: argparse.Namespace) -> int:
    try:
        with open(args.input, encoding="latin-1") as handle:
            found = find_inen_words(handle)
    except OSError:
        print(f"Failed to open {args.input}", file=sys.stderr)
        return 1
    lines = [f"{word} ({pronunciation})" for word, pronunciation in found]
    for line in lines:
        print(line)
    _write_lines(args.output, lines)
    print("Done!")
    return 0


def _cmd_starters(args: argparse.Namespace) -> int:
    try:
        words = _read_words(args.input)
    except OSError:
        words = []

    def report(entry: Pair) -> None:
        print(f"New top pair: {entry[0]} {entry[1]} with score {entry[2]}")

    pairs = _scan(words, args.limit, report)
    lines = [f"{w1} {w2} with score {score}" for w1, w2, score in pairs]
    print(f"Top {args.limit} pairs:")
    for line in lines:
        print(line)
    _write_lines(args.output, lines)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run one of the word-list tools."""
    parser = argparse.ArgumentParser(
        prog="puzzlebox-wordle", description="Word-list tools for Wordle starters."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    fives = sub.add_parser("fives", help="keep only five-letter words")
    fives.add_argument("--input", default="words_alpha.txt")
    fives.add_argument("--output", default="words_five.txt")
    fives.set_defaults(run=_cmd_fives)

    frequency = sub.add_parser("frequency", help="count letter frequencies")
    frequency.add_argument("--input", default="words_five.txt")
    frequency.add_argument("--output", default="five_frequency.txt")
    frequency.set_defaults(run=_cmd_frequency)

    inen = sub.add_parser("inen", help="find words with an unusual 'inen'")
    inen.add_argument("--input", default="cmudict.txt")
    inen.add_argument("--output", default="nen.txt")
    inen.set_defaults(run=_cmd_inen)

    starters = sub.add_parser("starters", help="find the best pairs of starting words")
    starters.add_argument("--input", default="words_five.txt")
    starters.add_argument("--output", default="best_starters.txt")
    starters.add_argument("--limit", type=int, default=10)
    starters.set_defaults(run=_cmd_starters)

    args = parser.parse_args(argv)
    return args.run(args)


if __name__ == "__main__":
    sys.exit(main())