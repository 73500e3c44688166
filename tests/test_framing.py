import pytest

from frqs import FramingError
from frqs.framing import base20_to_int, frame_branches, int_to_base20, unframe_branches

SEPARATORS = ['$', '%', '&']


def test_base20_reference_values():
    assert int_to_base20(0) == '0'
    assert int_to_base20(19) == 'J'
    assert int_to_base20(20) == '10'
    assert int_to_base20(399) == 'JJ'
    assert base20_to_int('10') == 20
    assert base20_to_int('JJ') == 399


def test_base20_rejects_bad_input():
    with pytest.raises(ValueError):
        int_to_base20(-1)
    with pytest.raises(ValueError):
        base20_to_int('K')
    with pytest.raises(ValueError):
        base20_to_int('')


def test_frame_layout():
    assert frame_branches(["a", "bc", "x" * 21], SEPARATORS) == "1$a2%bc11&" + "x" * 21


def test_unframe_handles_separators_and_digits_in_content():
    branches = ["$", "%%1", "&$0J", "9A", "-"]
    framed = frame_branches(branches, SEPARATORS)
    assert unframe_branches(framed, SEPARATORS) == branches


def test_unframe_empty():
    assert unframe_branches("", SEPARATORS) == []


@pytest.mark.parametrize("data", [
    "$a",          # no header
    "1",           # header without separator
    "1%a",         # wrong separator for frame 0
    "3$ab",        # truncated
    "1$a2%b",      # second frame truncated
])
def test_unframe_rejects_malformed(data):
    with pytest.raises(FramingError):
        unframe_branches(data, SEPARATORS)
