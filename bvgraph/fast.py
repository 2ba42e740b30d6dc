"""Small integer helpers: natural-number coding and bit-string formatting."""

_BYTE_MASK = 0xFF
_INT_MASK = 0xFFFFFFFF
_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


def int2nat(x: int) -> int:
    """Map an integer bijectively onto the natural numbers.

    A non-negative ``x`` goes to ``2x``, a negative one to ``-2x - 1``.
    The inverse is :func:`nat2int`.
    """
    return x << 1 if x >= 0 else (-x << 1) - 1


def nat2int(x: int) -> int:
    """Map a natural number back to the integer it codes; inverse of :func:`int2nat`."""
    return x >> 1 if x % 2 == 0 else -((x + 1) >> 1)


def byte_to_binary(x: int) -> str:
    """Return the low eight bits of ``x`` as a string of '0' and '1', most significant first."""
    return format(x & _BYTE_MASK, "08b")


def int_to_binary(x: int, length: int) -> str:
    """Return the low ``length`` bits of ``x`` (at most 64), most significant first.

    The digits are grouped in fours from the right, separated by single spaces.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    width = min(length, _WORD_BITS)
    if width == 0:
        return ""
    bits = format(x & _WORD_MASK, f"0{_WORD_BITS}b")[-width:]
    groups = [bits[max(0, end - 4):end] for end in range(len(bits), 0, -4)]
    return " ".join(reversed(groups))


def byte_as_hex(b: int) -> str:
    """Return at most the first two lower-case hex digits of ``b`` as a 32-bit value."""
    return format(b & _INT_MASK, "x")[:2]