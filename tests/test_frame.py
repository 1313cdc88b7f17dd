try:
    import pandas as pd
    PANDAS_OK = True
except Exception:  # pragma: no cover - environment without pandas
    PANDAS_OK = False

import pytest

from fuzzytext import create

pytestmark = pytest.mark.skipif(not PANDAS_OK, reason="pandas not installed")


def _df():
    return pd.DataFrame(
        {
            "cliente": ["the quick brown fox", "Hello, World!", None, "stainless steel valve"],
            "usuario": ["the quick brown fox jumps", "hello world", None, "copper pipe"],
            "ia": ["brown fox", "goodbye", "anything", "steel valves"],
        }
    )


def test_score_columns_adds_score_and_flag():
    from fuzzytext.frame import score_columns

    df = _df()
    out = score_columns(df, "cliente", "usuario")
    assert list(out["fuzzy_score"].round(4)) == [0.8, 1.0, 1.0, 0.0]
    assert list(out["fuzzy_equal"]) == [True, True, True, False]
    assert "fuzzy_score" not in df.columns


def test_score_columns_custom_prefix_and_instance():
    from fuzzytext.frame import score_columns

    out = score_columns(_df(), "cliente", "usuario", fuzzy=create(text_threshold=0.9), prefix="tok")
    assert list(out["tok_equal"]) == [False, True, True, False]


def test_score_columns_missing_column():
    from fuzzytext.frame import score_columns

    with pytest.raises(KeyError):
        score_columns(_df(), "cliente", "nope")


def test_best_match_picks_highest_and_first_on_tie():
    from fuzzytext.frame import best_match

    out = best_match(_df(), "cliente", ["usuario", "ia"])
    assert list(out["best_column"]) == ["usuario", "usuario", "usuario", "ia"]
    assert out["best_score"].iloc[0] == pytest.approx(0.8)
    assert out["best_score"].iloc[3] == pytest.approx(2 / 3)


def test_best_match_missing_column():
    from fuzzytext.frame import best_match

    with pytest.raises(KeyError):
        best_match(_df(), "cliente", ["usuario", "nope"])
