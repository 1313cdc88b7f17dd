"""
Character n-gram fuzzy text scorer.

Summary:
- Normalizes and stems both texts, then greedily aligns their words. Two words
  match when their character n-grams overlap enough; the text score is the
  overlap ratio of matched words: matches / (len(a) + len(b) - matches).

When to use:
- Fuzzy deduplication and near-duplicate detection where word order does not
  matter and small spelling or inflection differences should be tolerated.

Limitations:
- Greedy matching, not optimal; see `fuzzytext.matching`.
- Purely lexical; the stemmer is the only linguistic step.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Dict, List, Optional

from .matching import align_tokens, token_similarity
from .normalize import normalize_tokens
from .options import FuzzyOptions
from .stemming import Stemmer, get_stemmer

logger = logging.getLogger(__name__)

# Scorer name -> `(text_a, text_b) -> float` in [0.0, 1.0]
SCORER_REGISTRY: Dict[str, Callable[[str, str], float]] = {}


class Fuzzy:
    """A configured scorer. Immutable and safe to share between threads."""

    __slots__ = ("_options", "_stemmer")

    def __init__(self, options: Optional[FuzzyOptions] = None, stemmer: Optional[Stemmer] = None):
        self._options = (options or FuzzyOptions()).validate()
        self._stemmer = stemmer if stemmer is not None else get_stemmer(self._options.stemmer_locale)

    @property
    def options(self) -> FuzzyOptions:
        return self._options

    @property
    def stemmer(self) -> Stemmer:
        return self._stemmer

    def tokens(self, text: Optional[str]) -> List[str]:
        return normalize_tokens(text, self.options, self.stemmer)

    def align(self, first_text: Optional[str], second_text: Optional[str]) -> List[str]:
        """Stemmed words of `first_text` that found a partner in `second_text`."""
        return align_tokens(self.tokens(first_text), self.tokens(second_text), self.options)

    def compare(self, first_text: Optional[str], second_text: Optional[str]) -> float:
        return token_similarity(self.tokens(first_text), self.tokens(second_text), self.options)

    def equals(self, first_text: Optional[str], second_text: Optional[str]) -> bool:
        return self.compare(first_text, second_text) >= self.options.text_threshold

    def __repr__(self) -> str:
        return f"Fuzzy({self.options!r}, stemmer={self.stemmer!r})"


def create(stemmer: Optional[Stemmer] = None, **fields) -> Fuzzy:
    """Build a `Fuzzy` scorer; keyword arguments override `FuzzyOptions` defaults.

    Raises `InvalidConfiguration` for out-of-range fields and
    `UnsupportedLocale` when no stemmer is injected and the locale is unknown.
    """
    options = dataclasses.replace(FuzzyOptions(), **fields)
    fuzzy = Fuzzy(options, stemmer=stemmer)
    logger.debug("Created %r", fuzzy)
    return fuzzy


default = create()


def score_fuzzy_ngram(text_a: str, text_b: str) -> float:
    return default.compare(text_a, text_b)


# Register in global registry
SCORER_REGISTRY["fuzzy_ngram"] = score_fuzzy_ngram
