import random
import time

import pytest

from frqs.spiral import (
    apply_spiral,
    pattern_index,
    spiral_coordinates,
    spiral_permutation,
    spiral_permute,
    spiral_targets,
    spiral_unpermute
)


def test_spiral_coordinates_walk_outwards():
    assert spiral_coordinates(9) == [
        (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0),
        (-1, -1), (0, -1), (1, -1), (2, -1)
    ]


def test_spiral_targets_are_normalized():
    assert spiral_targets(0) == []
    assert spiral_targets(1) == [0]
    assert spiral_targets(4) == [1, 2, 1, 0]
    assert spiral_targets(6) == [1, 2, 1, 0, 5, 4]


def test_pattern_index_direction():
    assert [pattern_index(i, 4, True) for i in range(6)] == [0, 1, 2, 3, 0, 1]
    assert [pattern_index(i, 4, False) for i in range(6)] == [3, 2, 1, 0, 3, 2]


def test_apply_spiral_gathers_repeated_targets():
    out = apply_spiral("abcd", "xxxx", True)
    assert len(out) == 4
    # Steps 0 and 2 both read position 1
    assert out[0] == out[2]


def test_apply_spiral_empty():
    assert apply_spiral("", "abc", True) == ""


def test_spiral_permutation_small():
    assert list(spiral_permutation(1)) == [0]
    assert list(spiral_permutation(4)) == [1, 2, 3, 0]
    assert list(spiral_permutation(5)) == [1, 2, 3, 0, 4]


@pytest.mark.parametrize("length", list(range(1, 80)) + [128, 257, 1000])
def test_spiral_permutation_is_bijection(length):
    order = spiral_permutation(length)
    assert sorted(order.tolist()) == list(range(length))


@pytest.mark.parametrize("clockwise", [True, False])
def test_spiral_unpermute_inverts_permute(clockwise):
    rng = random.Random(1618)
    alphabet = [chr(code) for code in range(32, 127)] + ['é', '\n', '✓']
    pattern = "3fa9c0e1d2b47788"

    for length in range(1, 60):
        text = ''.join(rng.choice(alphabet) for _ in range(length))
        permuted = spiral_permute(text, pattern, clockwise)
        assert len(permuted) == length
        assert spiral_unpermute(permuted, pattern, clockwise) == text


def _naive_collision_order(length):
    taken = [False] * length
    order = []
    for target in spiral_targets(length):
        while taken[target]:
            target = (target + 1) % length
        taken[target] = True
        order.append(target)
    return order


@pytest.mark.parametrize("length", [2, 3, 17, 64, 100, 333, 1024])
def test_spiral_permutation_matches_linear_probing(length):
    assert spiral_permutation(length).tolist() == _naive_collision_order(length)


def test_spiral_permutation_scales_to_long_payloads():
    started = time.perf_counter()
    order = spiral_permutation(50_000)
    elapsed = time.perf_counter() - started

    assert sorted(order.tolist()) == list(range(50_000))
    assert elapsed < 5.0
