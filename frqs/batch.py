"""
Batch Reports
Run the cipher and comparator over many inputs and collect the results in DataFrames
"""

import logging
import pandas as pd
from .branch_engine import FRQSCipher
from .comparator import calculate_string_similarity, quantum_resistant_compare
from .constants import DEFAULT_TOLERANCE_PERCENT

logger = logging.getLogger(__name__)

REQUIRED_CORPUS_COLUMNS = ['plaintext', 'key']


def round_trip_report(pairs, cipher=None):
    """
    Encrypt and decrypt every (plaintext, key) pair.

    Args:
        pairs: Iterable of (plaintext, key) tuples
        cipher: FRQSCipher to use (default: a new instance)

    Returns:
        pd.DataFrame: One row per pair with columns plaintext, key_length,
            plaintext_length, ciphertext_length, branch_count, similarity,
            round_trip_ok
    """
    cipher = cipher or FRQSCipher()
    rows = []

    for plaintext, key in pairs:
        result = cipher.validate_round_trip(plaintext, key)
        rows.append({
            'plaintext': plaintext,
            'key_length': len(key),
            'plaintext_length': result['plaintext_length'],
            'ciphertext_length': result['ciphertext_length'],
            'branch_count': result['branch_count'],
            'similarity': result['similarity'],
            'round_trip_ok': result['is_valid']
        })

    report = pd.DataFrame(rows, columns=[
        'plaintext', 'key_length', 'plaintext_length', 'ciphertext_length',
        'branch_count', 'similarity', 'round_trip_ok'
    ])

    failures = int((~report['round_trip_ok']).sum()) if len(report) else 0
    logger.info(f"Round trip report: {len(report)} pairs, {failures} failures")
    return report


def similarity_report(pairs, tolerance_percent=DEFAULT_TOLERANCE_PERCENT):
    """
    Score every (a, b) pair with the fuzzy comparator.

    Returns:
        pd.DataFrame: Columns a, b, similarity, match
    """
    rows = [
        {
            'a': a,
            'b': b,
            'similarity': calculate_string_similarity(a, b),
            'match': quantum_resistant_compare(a, b, tolerance_percent)
        }
        for a, b in pairs
    ]
    return pd.DataFrame(rows, columns=['a', 'b', 'similarity', 'match'])


def load_corpus(path):
    """
    Load a CSV corpus with plaintext and key columns.

    Missing cells are read as empty strings.

    Raises:
        ValueError: If a required column is missing
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [col for col in REQUIRED_CORPUS_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Corpus {path} is missing columns: {missing}")

    return list(zip(df['plaintext'], df['key']))
