"""
Branch Framing
Length-prefixed frames for cipher branches using base-20 T-Hex headers

Frame layout: [T-HEX LENGTH][SEPARATOR][BRANCH]
Example: "B(" followed by 11 branch characters

Separators are drawn from chr(36)..chr(45), none of which belong to the
T-Hex alphabet, so a frame header always ends at the first non-T-Hex
character no matter what the branch content holds.
"""

from .constants import T_HEX_ALPHABET, T_HEX_BASE
from .errors import FramingError


def int_to_base20(num):
    """
    Convert a non-negative integer to base-20 using the T-Hex alphabet.

    Args:
        num: Integer to convert

    Returns:
        str: Base-20 encoded string
    """
    if num < 0:
        raise ValueError(f"Cannot encode negative value: {num}")

    if num == 0:
        return T_HEX_ALPHABET[0]

    result = []
    while num > 0:
        remainder = num % T_HEX_BASE
        result.append(T_HEX_ALPHABET[remainder])
        num = num // T_HEX_BASE

    return ''.join(reversed(result))


def base20_to_int(encoded_str):
    """
    Convert a base-20 T-Hex string to an integer.

    Args:
        encoded_str: Base-20 encoded string

    Returns:
        int: Decoded integer
    """
    if not encoded_str:
        raise ValueError("Empty T-Hex string")

    result = 0
    for char in encoded_str:
        if char not in T_HEX_ALPHABET:
            raise ValueError(f"Invalid T-Hex character: {char}")

        result = result * T_HEX_BASE + T_HEX_ALPHABET.index(char)

    return result


def frame_branches(branches, separators):
    """
    Frame each branch with its length and the separator of its octave.

    Args:
        branches: Transformed branch strings
        separators: Separator per octave, used cyclically by branch index

    Returns:
        str: Concatenated frames
    """
    frames = []
    for i, branch in enumerate(branches):
        separator = separators[i % len(separators)]
        frames.append(f"{int_to_base20(len(branch))}{separator}{branch}")
    return ''.join(frames)


def unframe_branches(data, separators):
    """
    Split framed data back into branches.

    Args:
        data: Framed string produced by frame_branches()
        separators: Same separators used for framing

    Returns:
        list: Branch strings in order

    Raises:
        FramingError: If a header is missing, a separator does not match
            the expected octave, or a frame is truncated
    """
    branches = []
    position = 0

    while position < len(data):
        index = len(branches)

        header_end = position
        while header_end < len(data) and data[header_end] in T_HEX_ALPHABET:
            header_end += 1

        if header_end == position:
            raise FramingError(f"Frame {index} has no length header at offset {position}")
        if header_end >= len(data):
            raise FramingError(f"Frame {index} ends before its separator")

        expected = separators[index % len(separators)]
        if data[header_end] != expected:
            raise FramingError(
                f"Frame {index} separator mismatch at offset {header_end}"
            )

        length = base20_to_int(data[position:header_end])
        start = header_end + 1
        branch = data[start:start + length]

        if len(branch) != length:
            raise FramingError(
                f"Frame {index} truncated: expected {length} characters, got {len(branch)}"
            )

        branches.append(branch)
        position = start + length

    return branches
