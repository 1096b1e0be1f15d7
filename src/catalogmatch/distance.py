"""Levenshtein edit distance."""


def levenshtein(a: str, b: str) -> int:
    """
    Return the minimum number of single-character insertions, deletions
    and substitutions needed to turn *a* into *b*.

    Only two rows of the DP table are kept, sized by the shorter string.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(
                    1 + min(previous[j], current[j - 1], previous[j - 1])
                )
        previous = current
    return previous[-1]
