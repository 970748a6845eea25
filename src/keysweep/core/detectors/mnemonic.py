"""
Mnemonic phrase matcher.

A window is a mnemonic candidate when it has exactly 12 or 24 words and
every word is in the dictionary.
"""

from collections.abc import Collection, Iterator, Sequence

from .models import MNEMONIC_WINDOW_SIZES

SHORT_WINDOW = MNEMONIC_WINDOW_SIZES[0]
LONG_WINDOW = MNEMONIC_WINDOW_SIZES[1]


def is_mnemonic_window(words: Sequence[str], dictionary: Collection[str]) -> bool:
    """
    Check whether a word window is made entirely of dictionary words.

    Args:
        words: Candidate window
        dictionary: Collection of lowercase dictionary words

    Returns:
        False for any length other than 12 or 24; otherwise True iff the
        lowercase form of every word is in the dictionary.
    """
    if len(words) not in MNEMONIC_WINDOW_SIZES:
        return False
    return all(word.lower() in dictionary for word in words)


def iter_mnemonic_windows(
    tokens: Sequence[str], dictionary: Collection[str]
) -> Iterator[tuple[int, list[str]]]:
    """
    Slide 12- and 24-word windows over a token stream.

    For every start index i in [0, len - 12] the window [i, i + 12) is
    tested, and [i, i + 24) as well whenever it fits. Overlapping hits are
    all yielded: a 24-word phrase also yields each of its 12-word
    sub-windows.

    Yields:
        (start index, window words) for every window that matches
    """
    total = len(tokens)
    for start in range(0, total - SHORT_WINDOW + 1):
        short_window = list(tokens[start:start + SHORT_WINDOW])
        if is_mnemonic_window(short_window, dictionary):
            yield start, short_window
        if start + LONG_WINDOW <= total:
            long_window = list(tokens[start:start + LONG_WINDOW])
            if is_mnemonic_window(long_window, dictionary):
                yield start, long_window
