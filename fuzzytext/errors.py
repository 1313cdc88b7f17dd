"""Exceptions raised by fuzzytext. All of them are raised at construction time."""


class FuzzyError(Exception):
    """Base class for fuzzytext errors."""


class InvalidConfiguration(FuzzyError, ValueError):
    """A configuration field is out of range or of the wrong type."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class UnsupportedLocale(FuzzyError, LookupError):
    """The stemming service has no algorithm for the requested locale."""

    def __init__(self, locale: str, available=()):
        hint = f" (available: {', '.join(available)})" if available else ""
        super().__init__(f"No stemmer for locale {locale!r}{hint}")
        self.locale = locale
