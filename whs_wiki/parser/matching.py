"""Closest-string lookup by edit distance."""

from typing import Sequence


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings.

    Insertions, deletions and substitutions all cost 1; comparison is
    case-sensitive.
    """
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def get_closest(text: str, alternatives: Sequence[str]) -> str:
    """Get the alternative closest to a text.

    Args:
        text: Query string.
        alternatives: Candidate strings.

    Returns:
        The first alternative with the minimal edit distance.

    Raises:
        ValueError: If there are no alternatives.
    """
    if not alternatives:
        raise ValueError("No alternatives to match against.")

    distances = [edit_distance(text, alt) for alt in alternatives]
    return alternatives[distances.index(min(distances))]
