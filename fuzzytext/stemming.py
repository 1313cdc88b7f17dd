"""
Stemming service keyed by locale name.

Summary:
- Any object with a `stem(word) -> str` method can be injected as a stemmer.
- `get_stemmer(locale)` resolves a Snowball algorithm ("english", "spanish",
  "russian", ...) through the `snowballstemmer` package.

Thread safety:
- `snowballstemmer` objects keep the current word as internal state, so
  `SnowballStemmer` holds one underlying stemmer per thread.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Protocol

import snowballstemmer

from .errors import UnsupportedLocale

logger = logging.getLogger(__name__)


class Stemmer(Protocol):
    def stem(self, word: str) -> str:
        ...


def available_locales() -> List[str]:
    return sorted(snowballstemmer.algorithms())


class SnowballStemmer:
    """Reentrant wrapper around a `snowballstemmer` algorithm."""

    def __init__(self, locale: str):
        self.locale = locale
        self._local = threading.local()

    def _impl(self):
        impl = getattr(self._local, "impl", None)
        if impl is None:
            impl = snowballstemmer.stemmer(self.locale)
            self._local.impl = impl
        return impl

    def stem(self, word: str) -> str:
        return self._impl().stemWord(word)

    def __repr__(self) -> str:
        return f"SnowballStemmer({self.locale!r})"


def get_stemmer(locale: str) -> SnowballStemmer:
    """Return the stemmer for `locale` or raise `UnsupportedLocale`."""
    key = (locale or "").strip().lower()
    known = available_locales()
    if key not in known:
        raise UnsupportedLocale(locale, known)
    logger.debug("Resolved stemmer locale %r -> %r", locale, key)
    return SnowballStemmer(key)
