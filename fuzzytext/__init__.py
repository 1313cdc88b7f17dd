"""
fuzzytext package export and registration.

Exposes the scorer factory `create`, the default instance and its bound
`compare` / `equals`, and `SCORER_REGISTRY`. Importing the package registers
the 'fuzzy_ngram' scorer.
"""

from .errors import FuzzyError, InvalidConfiguration, UnsupportedLocale  # noqa: F401
from .options import FuzzyOptions  # noqa: F401
from .stemming import Stemmer, available_locales, get_stemmer  # noqa: F401

# side-effect: registers 'fuzzy_ngram'
from .fuzzy_ngram import SCORER_REGISTRY, Fuzzy, create, default  # noqa: F401

compare = default.compare
equals = default.equals
