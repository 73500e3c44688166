#!/usr/bin/env python3
"""
FRQS Command Line Tool

Utility script to run the FRQS pipeline on strings from the shell.

Usage:
    python manage_frqs.py encode <seed> [--depth N]           Fractal-encode a seed
    python manage_frqs.py derive-key <seed> [--length N]      Derive a key from a seed
    python manage_frqs.py distribution <key>                  Show the 12 octaves of a key
    python manage_frqs.py encrypt <text> <key>                Obfuscate text
    python manage_frqs.py decrypt <text> <key>                Recover obfuscated text
    python manage_frqs.py compare <a> <b> [--tolerance P]     Fuzzy-compare two strings
    python manage_frqs.py audit <corpus.csv>                  Round-trip a CSV corpus
"""

import sys
import argparse
import logging
from dotenv import load_dotenv

from frqs import (
    FRQSError,
    calculate_string_similarity,
    decrypt_with_frqs,
    encode_with_fractal_recursion,
    encrypt_with_frqs,
    generate_fractal_recursive_key,
    generate_key_distribution,
    quantum_resistant_compare,
    separator_for
)
from frqs.batch import load_corpus, round_trip_report
from frqs.config import configure_logging, load_config

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def encode_seed(seed: str, depth: int):
    """Print the fractal encoding of a seed."""
    print(encode_with_fractal_recursion(seed, depth))
    return True


def derive_key(seed: str, length: int):
    """Print a key derived from a seed."""
    print(generate_fractal_recursive_key(seed, length))
    return True


def show_distribution(key: str):
    """Print the key distribution, one octave per line."""
    distribution = generate_key_distribution(key)

    print(f"\n{'Octave':<8} {'Sub-key':<18} {'Sep':<4}")
    print("-" * 30)
    for index, octave in enumerate(distribution):
        print(f"{index:<8} {octave:<18} {separator_for(octave):<4}")
    return True


def encrypt_text(text: str, key: str):
    """Print the obfuscated form of text."""
    print(encrypt_with_frqs(text, key))
    return True


def decrypt_text(text: str, key: str):
    """Print the recovered plaintext."""
    print(decrypt_with_frqs(text, key))
    return True


def compare_values(a: str, b: str, tolerance: float):
    """Print the similarity and whether the values match within tolerance."""
    similarity = calculate_string_similarity(a, b)
    matched = quantum_resistant_compare(a, b, tolerance)

    status = "MATCH" if matched else "NO MATCH"
    status_color = "\033[92m" if matched else "\033[91m"
    reset = "\033[0m"
    print(f"Similarity: {similarity:.4f} (tolerance {tolerance}%)")
    print(f"{status_color}{status}{reset}")
    return matched


def audit_corpus(path: str):
    """Round-trip every pair in a CSV corpus and print the report."""
    report = round_trip_report(load_corpus(path))
    if report.empty:
        print("No rows in corpus")
        return True

    print(report[['plaintext_length', 'ciphertext_length', 'branch_count', 'round_trip_ok']])

    failures = int((~report['round_trip_ok']).sum())
    print(f"\nTotal: {len(report)} pair(s), {failures} failure(s)")
    return failures == 0


def main(argv=None):
    config = load_config()
    configure_logging(config['FRQS_LOG_LEVEL'])

    parser = argparse.ArgumentParser(
        description="Run the FRQS string transformation pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python manage_frqs.py encode hello --depth 2
    python manage_frqs.py derive-key hello --length 16
    python manage_frqs.py encrypt "pay 10 to alice" wallet-key
    python manage_frqs.py compare hello hallo --tolerance 20
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Encode command
    encode_parser = subparsers.add_parser('encode', help='Fractal-encode a seed')
    encode_parser.add_argument('seed', help='Seed string')
    encode_parser.add_argument(
        '--depth',
        type=int,
        default=config['FRQS_ENCODE_DEPTH'],
        help=f"Recursion depth (default: {config['FRQS_ENCODE_DEPTH']})"
    )

    # Derive key command
    key_parser = subparsers.add_parser('derive-key', help='Derive a key from a seed')
    key_parser.add_argument('seed', help='Seed string')
    key_parser.add_argument(
        '--length',
        type=int,
        default=config['FRQS_KEY_LENGTH'],
        help=f"Key length (default: {config['FRQS_KEY_LENGTH']})"
    )

    # Distribution command
    dist_parser = subparsers.add_parser('distribution', help='Show the key distribution')
    dist_parser.add_argument('key', help='Key string')

    # Encrypt command
    encrypt_parser = subparsers.add_parser('encrypt', help='Obfuscate text with a key')
    encrypt_parser.add_argument('text', help='Plaintext')
    encrypt_parser.add_argument('key', help='Key string')

    # Decrypt command
    decrypt_parser = subparsers.add_parser('decrypt', help='Recover text with a key')
    decrypt_parser.add_argument('text', help='Ciphertext')
    decrypt_parser.add_argument('key', help='Key string')

    # Compare command
    compare_parser = subparsers.add_parser('compare', help='Fuzzy-compare two strings')
    compare_parser.add_argument('a', help='First value')
    compare_parser.add_argument('b', help='Second value')
    compare_parser.add_argument(
        '--tolerance',
        type=float,
        default=config['FRQS_TOLERANCE_PERCENT'],
        help=f"Tolerance in percent (default: {config['FRQS_TOLERANCE_PERCENT']})"
    )

    # Audit command
    audit_parser = subparsers.add_parser('audit', help='Round-trip a CSV corpus (plaintext,key)')
    audit_parser.add_argument('corpus', help='Path to CSV file')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == 'encode':
            ok = encode_seed(args.seed, args.depth)
        elif args.command == 'derive-key':
            ok = derive_key(args.seed, args.length)
        elif args.command == 'distribution':
            ok = show_distribution(args.key)
        elif args.command == 'encrypt':
            ok = encrypt_text(args.text, args.key)
        elif args.command == 'decrypt':
            ok = decrypt_text(args.text, args.key)
        elif args.command == 'compare':
            ok = compare_values(args.a, args.b, args.tolerance)
        elif args.command == 'audit':
            ok = audit_corpus(args.corpus)
    except (FRQSError, ValueError, OSError) as e:
        logger.warning(f"{args.command} failed: {e}")
        print(f"Error: {e}")
        return 1

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
