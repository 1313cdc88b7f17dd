"""
Two-level greedy matching.

Summary:
- Word level: two words are "equal" when the Jaccard-style overlap of their
  character n-grams (sub-tokens) reaches `word_threshold`.
- Text level: tokens of the first text are aligned with tokens of the second
  using the word-level test, and the same overlap ratio is computed over the
  matched tokens.

Matching policy:
- Greedy, first available candidate in left-to-right order, no backtracking.
  This is not a maximum bipartite matching; on ambiguous inputs the result can
  depend on argument order.
- For the same reason the text score is not monotonic in `word_threshold`:
  a stricter threshold can stop an early token from taking a weak partner,
  leaving that partner free for a later token with a stronger match.
  ["cbab", "cbaac"] vs ["cacba", "bab"] scores 1/3 at 0.3 and 1.0 at 0.6.

Score range:
- Ratios are in [0.0, 1.0]. Two empty token lists -> 1.0; exactly one empty
  -> 0.0. Two words that both yield no sub-tokens are equal only when the raw
  words are identical.
"""

from __future__ import annotations

import operator
from typing import Callable, List, Sequence

from .options import FuzzyOptions


def sub_tokens(word: str, token_length: int) -> List[str]:
    """Sliding windows of width `token_length`, stride 1 ([] if word is shorter)."""
    return [word[i:i + token_length] for i in range(len(word) - token_length + 1)]


def greedy_matches(
    first: Sequence[str],
    second: Sequence[str],
    equal: Callable[[str, str], bool] = operator.eq,
) -> List[str]:
    """Pair each item of `first` with the first unused item of `second` it equals.

    Returns the matched items of `first`, in order.
    """
    used = [False] * len(second)
    matched = []
    for a in first:
        for j, b in enumerate(second):
            if not used[j] and equal(a, b):
                used[j] = True
                matched.append(a)
                break
    return matched


def overlap_ratio(first_count: int, second_count: int, match_count: int) -> float:
    denominator = first_count + second_count - match_count
    if denominator <= 0:
        return 1.0
    return match_count / denominator


def word_similarity(first: str, second: str, token_length: int) -> float:
    a = sub_tokens(first, token_length)
    b = sub_tokens(second, token_length)
    if not a and not b:
        return 1.0 if first == second else 0.0
    return overlap_ratio(len(a), len(b), len(greedy_matches(a, b)))


def words_equal(first: str, second: str, options: FuzzyOptions) -> bool:
    return word_similarity(first, second, options.token_length) >= options.word_threshold


def align_tokens(first: Sequence[str], second: Sequence[str], options: FuzzyOptions) -> List[str]:
    return greedy_matches(first, second, lambda a, b: words_equal(a, b, options))


def token_similarity(first: Sequence[str], second: Sequence[str], options: FuzzyOptions) -> float:
    matched = align_tokens(first, second, options)
    return overlap_ratio(len(first), len(second), len(matched))
