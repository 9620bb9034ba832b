import random

from cpkit.suffix_automaton import SuffixAutomaton


def _occurrences(text, pattern):
    return sum(1 for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i))


def test_add_then_count_rebuilds():
    sam = SuffixAutomaton("ab")
    sam.add("a", 2)
    sam.add("b", 3)
    assert sam.count("ab", 2) == _occurrences("abab", "ab")


def test_root_occurrence_is_text_length():
    text = "abcab"
    sam = SuffixAutomaton(text)
    assert sam.occ[0] == len(text)