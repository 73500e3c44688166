from frqs.sacred_math import (
    generate_fibonacci_sequence,
    golden_fraction,
    golden_ratio_sequence,
    pi_window,
    sha256_hex
)


def test_fibonacci_sequence():
    assert generate_fibonacci_sequence(0) == []
    assert generate_fibonacci_sequence(-2) == []
    assert generate_fibonacci_sequence(1) == [1]
    assert generate_fibonacci_sequence(6) == [1, 1, 2, 3, 5, 8]


def test_golden_ratio_sequence_reference_values():
    assert golden_ratio_sequence(10) == [158, 158, 60, 218, 23, 241, 8, 250, 3, 253]


def test_golden_ratio_sequence_bounds():
    values = golden_ratio_sequence(300)
    assert len(values) == 300
    assert all(0 <= value <= 255 for value in values)
    assert golden_ratio_sequence(0) == []


def test_golden_fraction_of_huge_power_is_zero():
    assert golden_fraction(100) == 0.0
    assert golden_fraction(5000) == 0.0


def test_pi_window():
    assert pi_window(0) == [1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
    assert pi_window(1) == [5, 3, 5, 8, 9, 7, 9, 3, 2, 3]
    # (13 * 7) % 90 wraps back to offset 1
    assert pi_window(13) == [4, 1, 5, 9, 2, 6, 5, 3, 5, 8]


def test_sha256_hex():
    assert sha256_hex("hello") == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
