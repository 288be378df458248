"""Levenshtein edit distance."""

from __future__ import annotations

import numpy as np


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes or substitutions
    turning *a* into *b*.

    Case-sensitive; callers normalise before comparing.
    """
    rows, cols = len(a) + 1, len(b) + 1
    dp = np.zeros((rows, cols), dtype=np.int64)
    dp[:, 0] = np.arange(rows)
    dp[0, :] = np.arange(cols)

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                dp[i, j] = dp[i - 1, j - 1]
            else:
                dp[i, j] = 1 + min(dp[i - 1, j], dp[i, j - 1], dp[i - 1, j - 1])

    return int(dp[rows - 1, cols - 1])
