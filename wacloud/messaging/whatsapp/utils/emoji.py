"""
Emoji detection helpers.

Approximates the Unicode Extended_Pictographic property with the code point
blocks that hold it; the standard library ``re`` module has no \\p{...} classes.
"""

_PICTOGRAPHIC_RANGES: tuple[tuple[int, int], ...] = (
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x2194, 0x2199),
    (0x21A9, 0x21AA),
    (0x231A, 0x231B),
    (0x2328, 0x2328),
    (0x2388, 0x2388),
    (0x23CF, 0x23CF),
    (0x23E9, 0x23F3),
    (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB),
    (0x25B6, 0x25B6),
    (0x25C0, 0x25C0),
    (0x25FB, 0x25FE),
    (0x2600, 0x27BF),
    (0x2934, 0x2935),
    (0x2B05, 0x2B07),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
    (0x1F000, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
)


def is_pictographic(char: str) -> bool:
    """Check whether a single character is an extended pictographic code point."""
    code = ord(char)
    return any(start <= code <= end for start, end in _PICTOGRAPHIC_RANGES)


def is_single_emoji(text: str) -> bool:
    """Check whether ``text`` is exactly one pictographic character."""
    return len(text) == 1 and is_pictographic(text)


def contains_emoji(text: str) -> bool:
    """Check whether ``text`` contains any pictographic character."""
    return any(is_pictographic(char) for char in text)
