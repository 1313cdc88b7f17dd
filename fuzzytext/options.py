"""
Configuration for the n-gram fuzzy scorer.

Summary:
- `FuzzyOptions` bundles the six knobs of the algorithm. It is frozen: one
  instance is shared read-only by every comparison made with it.

Defaults:
- delimiter=" ", stemmer_locale="english", text_threshold=0.25,
  word_threshold=0.45, token_length=2, min_word_length=3.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class FuzzyOptions:
    delimiter: str = " "
    stemmer_locale: str = "english"
    text_threshold: float = 0.25
    word_threshold: float = 0.45
    token_length: int = 2
    min_word_length: int = 3

    def validate(self) -> "FuzzyOptions":
        """Raise `InvalidConfiguration` on the first bad field; return self."""
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise InvalidConfiguration("delimiter", "must be a non-empty string")
        if not isinstance(self.stemmer_locale, str) or not self.stemmer_locale.strip():
            raise InvalidConfiguration("stemmer_locale", "must be a non-empty string")
        _check_ratio("text_threshold", self.text_threshold)
        _check_ratio("word_threshold", self.word_threshold)
        _check_int("token_length", self.token_length, minimum=1)
        _check_int("min_word_length", self.min_word_length, minimum=0)
        return self


def _check_ratio(field: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise InvalidConfiguration(field, f"expected a number in [0, 1], got {value!r}")
    if not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(field, f"{value!r} is outside [0, 1]")


def _check_int(field: str, value, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(field, f"expected an integer, got {value!r}")
    if value < minimum:
        raise InvalidConfiguration(field, f"must be >= {minimum}, got {value}")
