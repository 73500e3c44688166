"""
Fuzzy Comparator
Normalized edit-distance similarity with a tolerance threshold
"""

import numpy as np
from .constants import DEFAULT_TOLERANCE_PERCENT


def calculate_levenshtein_distance(str1, str2):
    """
    Levenshtein distance with unit costs for insertion, deletion and substitution.

    Args:
        str1: First string
        str2: Second string

    Returns:
        int: Edit distance
    """
    m = len(str1)
    n = len(str2)

    d = np.zeros((m + 1, n + 1), dtype=np.int64)
    d[:, 0] = np.arange(m + 1)
    d[0, :] = np.arange(n + 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if str1[i - 1] == str2[j - 1] else 1
            d[i, j] = min(
                d[i - 1, j] + 1,         # deletion
                d[i, j - 1] + 1,         # insertion
                d[i - 1, j - 1] + cost   # substitution
            )

    return int(d[m, n])


def calculate_string_similarity(str1, str2):
    """
    Similarity score in [0, 1]: 1 - distance / longer length.

    Equal strings score 1.0; an empty string against a non-empty one scores 0.0.
    """
    if str1 == str2:
        return 1.0
    if not str1 or not str2:
        return 0.0

    distance = calculate_levenshtein_distance(str1, str2)
    return 1 - (distance / max(len(str1), len(str2)))


def quantum_resistant_compare(value1, value2, tolerance_percent=DEFAULT_TOLERANCE_PERCENT):
    """
    Fuzzy equality within a tolerance percentage.

    Despite the name this is plain approximate matching, with no
    cryptographic meaning.

    Args:
        value1: First value
        value2: Second value
        tolerance_percent: Allowed dissimilarity in percent (default: 5)

    Returns:
        bool: True if similarity >= (100 - tolerance_percent) / 100;
            False if either value is empty
    """
    if not value1 or not value2:
        return False

    similarity_score = calculate_string_similarity(value1, value2)
    return similarity_score >= (100 - tolerance_percent) / 100
