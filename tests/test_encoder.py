from __future__ import annotations

import warnings

import numpy as np
import pandas as pd
import pytest

from onehot_sql.data.catalog import EncodingCatalog
from onehot_sql.encoding.encoder import encode_categoricals, encode_column
from onehot_sql.encoding.naming import NamingPolicy, indicator_specs


@pytest.fixture()
def cut_catalog() -> EncodingCatalog:
    return EncodingCatalog(
        numeric_columns=(),
        categorical_columns=("cut",),
        levels={"cut": ("Fair", "Good", "Ideal")},
    )


def test_cut_example(cut_catalog, naming):
    df = pd.DataFrame({"cut": ["Ideal", None, "Premium"]})
    block = encode_categoricals(df, cut_catalog, naming)

    assert list(block.frame.columns) == ["cut_Fair", "cut_Good", "cut_Ideal"]
    assert block.frame.iloc[0].tolist() == [0.0, 0.0, 1.0]
    assert block.frame.iloc[1].isna().all()
    assert block.frame.iloc[2].tolist() == [0.0, 0.0, 0.0]
    assert block.unseen == {"cut": ["Premium"]}


def test_exactly_one_hot_for_known_values(diamonds, diamonds_catalog, naming):
    block = encode_categoricals(diamonds, diamonds_catalog, naming)
    for col in diamonds_catalog.categorical_columns:
        cols = [c for c in block.frame.columns if c.startswith(col + "_")]
        sums = block.frame[cols].sum(axis=1)
        assert (sums == 1).all()
        assert block.frame[cols].isin([0.0, 1.0]).all().all()
    assert block.unseen == {}


def test_missing_propagates_only_to_its_row_and_column(diamonds, diamonds_catalog, naming):
    df = diamonds.copy()
    df["color"] = df["color"].astype(object)
    df.loc[2, "color"] = None
    block = encode_categoricals(df, diamonds_catalog, naming)

    color_cols = ["color_E", "color_I", "color_J"]
    assert block.frame.loc[2, color_cols].isna().all()
    assert block.frame.drop(index=2)[color_cols].notna().all().all()
    other = [c for c in block.frame.columns if c not in color_cols]
    assert block.frame[other].notna().all().all()


def test_unseen_values_are_reported_once_in_first_seen_order(cut_catalog, naming):
    df = pd.DataFrame({"cut": ["Zeta", "Premium", "Zeta", np.nan, "Fair"]})
    block = encode_categoricals(df, cut_catalog, naming)
    assert block.unseen == {"cut": ["Zeta", "Premium"]}
    assert block.frame.iloc[[0, 1, 2]].sum().sum() == 0
    assert block.frame.iloc[3].isna().all()
    assert block.frame.iloc[4].tolist() == [1.0, 0.0, 0.0]


def test_unseen_values_never_extend_catalog(cut_catalog, naming):
    df = pd.DataFrame({"cut": ["Premium"]})
    block = encode_categoricals(df, cut_catalog, naming)
    assert cut_catalog.levels["cut"] == ("Fair", "Good", "Ideal")
    assert block.frame.shape == (1, 3)


def test_normalized_names_still_match_raw_level():
    catalog = EncodingCatalog(
        numeric_columns=(),
        categorical_columns=("cut",),
        levels={"cut": ("Very Good", "Fair")},
    )
    df = pd.DataFrame({"cut": ["Very Good", "Fair", "VeryGood"]})
    block = encode_categoricals(df, catalog, NamingPolicy())
    assert list(block.frame.columns) == ["cut_VeryGood", "cut_Fair"]
    assert block.frame.iloc[0].tolist() == [1.0, 0.0]
    assert block.frame.iloc[2].tolist() == [0.0, 0.0]
    assert block.unseen == {"cut": ["VeryGood"]}


@pytest.mark.parametrize(
    "policy, expected",
    [
        (NamingPolicy(), "grade_ab12"),
        (NamingPolicy(ws_replace_with="_"), "grade_a_b_12"),
        (NamingPolicy(ws_replace=False), "grade_a - b/12"),
        (NamingPolicy(sep="."), "grade.ab12"),
        (NamingPolicy(sep=""), "gradeab12"),
    ],
)
def test_indicator_naming_policy(policy, expected):
    assert policy.indicator_name("grade", "a - b/12") == expected


def test_indicator_specs_follow_catalog_order(diamonds_catalog, naming):
    specs = indicator_specs(diamonds_catalog, naming)
    assert [s.column for s in specs][:3] == ["cut", "cut", "cut"]
    assert specs[3].name == "color_E"
    assert len(specs) == diamonds_catalog.n_indicators


def test_dates_match_date_levels():
    series = pd.Series(pd.to_datetime(["2017-01-05", "2017-01-04", None, "2017-05-01"]))
    frame, unseen = encode_column(
        series,
        basis=pd.DataFrame(np.eye(2), index=["2017-01-04", "2017-01-05"], columns=["a", "b"]),
        names=["tsdt_20170104", "tsdt_20170105"],
    )
    assert frame.iloc[0].tolist() == [0.0, 1.0]
    assert frame.iloc[1].tolist() == [1.0, 0.0]
    assert frame.iloc[2].isna().all()
    assert frame.iloc[3].tolist() == [0.0, 0.0]
    assert unseen == ["2017-05-01"]


def test_categorical_dtype_and_text_encode_identically(diamonds, diamonds_catalog, naming):
    as_text = diamonds.copy()
    as_text["cut"] = as_text["cut"].astype(str)
    a = encode_categoricals(diamonds, diamonds_catalog, naming).frame
    b = encode_categoricals(as_text, diamonds_catalog, naming).frame
    pd.testing.assert_frame_equal(a, b)


def test_index_is_preserved(cut_catalog, naming):
    df = pd.DataFrame({"cut": ["Fair", "Good"]}, index=[10, 10])
    block = encode_categoricals(df, cut_catalog, naming)
    assert list(block.frame.index) == [10, 10]


def test_unseen_values_encode_without_warnings(cut_catalog, naming):
    df = pd.DataFrame({"cut": ["Premium", "Fair", None, "Zeta"]})
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        block = encode_categoricals(df, cut_catalog, naming)
    assert block.frame.iloc[[0, 3]].sum().sum() == 0
    assert block.frame.iloc[1].tolist() == [1.0, 0.0, 0.0]
    assert block.unseen == {"cut": ["Premium", "Zeta"]}


def test_rows_come_from_catalog_contrasts(cut_catalog):
    basis = cut_catalog.contrasts("cut")
    frame, _ = encode_column(pd.Series(["Good", "Ideal", "Fair"]), basis=basis, names=["g", "i", "f"])
    np.testing.assert_array_equal(frame.to_numpy(), basis.loc[["Good", "Ideal", "Fair"]].to_numpy())


def test_float_integer_codes_match_integer_levels(naming):
    catalog = EncodingCatalog(numeric_columns=(), categorical_columns=("grade",), levels={"grade": ("1", "2")})
    df = pd.DataFrame({"grade": pd.Series([1.0, np.nan, 2.0], dtype=object)})
    block = encode_categoricals(df, catalog, naming)
    assert block.unseen == {}
    assert block.frame.iloc[0].tolist() == [1.0, 0.0]
    assert block.frame.iloc[1].isna().all()
    assert block.frame.iloc[2].tolist() == [0.0, 1.0]
