import itertools

import pytest

from frqs.comparator import (
    calculate_levenshtein_distance,
    calculate_string_similarity,
    quantum_resistant_compare
)

WORDS = ["hello", "hallo", "help", "", "h", "wallet", "wallets", "tellaw", "héllo"]


@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("", "abc", 3),
    ("abc", "", 3),
    ("same", "same", 0),
    ("hello", "hallo", 1),
])
def test_levenshtein_distance(a, b, expected):
    assert calculate_levenshtein_distance(a, b) == expected


def test_string_similarity():
    assert calculate_string_similarity("abc", "abc") == 1.0
    assert calculate_string_similarity("", "abc") == 0.0
    assert calculate_string_similarity("hello", "hallo") == pytest.approx(0.8)
    assert calculate_string_similarity("abcd", "wxyz") == 0.0


def test_hello_hallo_scenario():
    assert quantum_resistant_compare("hello", "hallo", 20) is True
    assert quantum_resistant_compare("hello", "hallo", 19) is False
    assert quantum_resistant_compare("hello", "hallo") is False


def test_empty_values_never_match():
    assert quantum_resistant_compare("", "", 100) is False
    assert quantum_resistant_compare("abc", "", 100) is False
    assert quantum_resistant_compare("", "abc", 100) is False


@pytest.mark.parametrize("tolerance", [0, 5, 20, 50, 100])
def test_symmetry(tolerance):
    for a, b in itertools.product(WORDS, repeat=2):
        assert quantum_resistant_compare(a, b, tolerance) == quantum_resistant_compare(b, a, tolerance)


@pytest.mark.parametrize("tolerance", [0, 0.5, 5, 100])
def test_reflexivity(tolerance):
    for word in WORDS:
        if word:
            assert quantum_resistant_compare(word, word, tolerance) is True
