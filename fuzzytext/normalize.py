"""
Text normalization: raw text -> list of stemmed words.

Steps, in order: trim, strip punctuation, lowercase, split on the configured
delimiter, drop words shorter than `min_word_length`, stem the survivors.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .options import FuzzyOptions
from .stemming import Stemmer

# Character class only; stripping is not word-boundary aware and keeps digits.
PUNCTUATION_RE = re.compile(r"""['`~!@#$%^&*()_|+=?;:",.<>{}\[\]\\/-]""")


def strip_punctuation(text: str) -> str:
    return PUNCTUATION_RE.sub("", text)


def normalize_tokens(text: Optional[str], options: FuzzyOptions, stemmer: Stemmer) -> List[str]:
    s = strip_punctuation((text or "").strip()).lower()
    words = [w for w in s.split(options.delimiter) if len(w) >= options.min_word_length]
    return [stemmer.stem(w) for w in words]
