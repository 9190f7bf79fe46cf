"""Length metrics for record text.

The school records system (NEIS) stores every Hangul syllable or jamo as
3 bytes and everything else (digits, Latin letters, whitespace, newlines,
punctuation, other scripts) as 1 byte. Record quotas are expressed in that
unit, so the presentation layer measures drafts with it.
"""

from dataclasses import dataclass

_HANGUL_RANGES: tuple[tuple[int, int], ...] = (
    (0xAC00, 0xD7A3),  # precomposed syllables
    (0x1100, 0x11FF),  # jamo
    (0x3130, 0x318F),  # compatibility jamo
)

HANGUL_WEIGHT = 3
DEFAULT_WEIGHT = 1


def is_hangul(ch: str) -> bool:
    code = ord(ch)
    return any(low <= code <= high for low, high in _HANGUL_RANGES)


def neis_byte_length(text: str) -> int:
    """Return the NEIS byte length of text."""
    return sum(HANGUL_WEIGHT if is_hangul(ch) else DEFAULT_WEIGHT for ch in text)


def char_count(text: str, *, include_whitespace: bool = True) -> int:
    if include_whitespace:
        return len(text)
    return sum(1 for ch in text if not ch.isspace())


@dataclass(frozen=True)
class TextStats:
    """All counters shown next to a generated record."""

    chars: int
    chars_no_space: int
    bytes: int


def measure(text: str) -> TextStats:
    return TextStats(
        chars=char_count(text),
        chars_no_space=char_count(text, include_whitespace=False),
        bytes=neis_byte_length(text),
    )
