import dataclasses

import pytest

from fuzzytext import (
    FuzzyError,
    FuzzyOptions,
    InvalidConfiguration,
    UnsupportedLocale,
    available_locales,
    create,
    get_stemmer,
)


def test_defaults():
    opts = FuzzyOptions()
    assert opts.delimiter == " "
    assert opts.stemmer_locale == "english"
    assert opts.text_threshold == 0.25
    assert opts.word_threshold == 0.45
    assert opts.token_length == 2
    assert opts.min_word_length == 3
    assert opts.validate() is opts


def test_options_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FuzzyOptions().token_length = 3


@pytest.mark.parametrize(
    "fields",
    [
        {"text_threshold": 1.5},
        {"text_threshold": -0.1},
        {"word_threshold": float("nan")},
        {"word_threshold": True},
        {"word_threshold": "0.5"},
        {"token_length": 0},
        {"token_length": 2.0},
        {"min_word_length": -1},
        {"delimiter": ""},
        {"delimiter": None},
    ],
)
def test_invalid_configuration(fields):
    with pytest.raises(InvalidConfiguration) as exc:
        create(**fields)
    assert exc.value.field == next(iter(fields))
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, FuzzyError)


def test_boundary_values_accepted():
    create(text_threshold=0, word_threshold=1.0, token_length=1, min_word_length=0)


def test_unknown_field_is_type_error():
    with pytest.raises(TypeError):
        create(threshold=0.5)


def test_unsupported_locale():
    with pytest.raises(UnsupportedLocale) as exc:
        create(stemmer_locale="klingon")
    assert exc.value.locale == "klingon"
    assert isinstance(exc.value, LookupError)


def test_locale_lookup():
    assert "english" in available_locales()
    assert get_stemmer(" English ").stem("running") == "run"
    assert create(stemmer_locale="spanish").compare("canciones", "cancion") == 1.0
