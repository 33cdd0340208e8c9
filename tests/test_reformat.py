"""Tests for the conversion to the sample-major layout."""

import numpy as np
import pandas as pd
import pytest

from sigmutsim.constants import canonical_class_tokens
from sigmutsim.constants import canonical_types_order
from sigmutsim.constants import extract_class_token
from sigmutsim.reformat import row_to_column


@pytest.fixture
def catalog():
    rng = np.random.default_rng(11)
    return pd.DataFrame(rng.integers(0, 20, size=(96, 3)),
                        index=canonical_types_order,
                        columns=["T1", "T2", "T3"])


def test_canonical_orders_agree():
    assert len(canonical_class_tokens) == 96
    assert len(set(canonical_class_tokens)) == 96
    assert [extract_class_token(t) for t in canonical_types_order] == \
        canonical_class_tokens
    assert canonical_class_tokens[:4] == ["ACAA", "ACAC", "ACAG", "ACAT"]
    assert canonical_class_tokens[-1] == "TTGT"


def test_canonical_catalog_round_trip(catalog):
    out = row_to_column(catalog)

    assert out.columns[0] == "Tumor_Sample_Barcode"
    assert out.columns[1:].tolist() == canonical_class_tokens
    assert out["Tumor_Sample_Barcode"].tolist() == ["T1", "T2", "T3"]
    assert out.index.tolist() == ["T1", "T2", "T3"]
    np.testing.assert_array_equal(out.iloc[:, 1:].to_numpy(),
                                  catalog.to_numpy().T)


def test_shuffled_rows_are_reordered(catalog):
    shuffled = catalog.sample(frac=1, random_state=3)
    out = row_to_column(shuffled)
    np.testing.assert_array_equal(out.iloc[:, 1:].to_numpy(),
                                  catalog.to_numpy().T)


def test_extra_rows_are_ignored(catalog):
    extra = pd.DataFrame([[1, 1, 1]], index=["N[N>N]N"],
                         columns=catalog.columns)
    out = row_to_column(pd.concat([catalog, extra]))
    assert out.shape == (3, 97)


def test_missing_class_raises(catalog):
    with pytest.raises(ValueError, match="missing"):
        row_to_column(catalog.drop(index="T[T>G]T"))


def test_duplicated_class_raises(catalog):
    duplicated = pd.concat([catalog, catalog.loc[["A[C>A]A"]]])
    with pytest.raises(ValueError, match="duplicated"):
        row_to_column(duplicated)


def test_unparseable_type_raises(catalog):
    short = pd.DataFrame([[1, 1, 1]], index=["ACA"],
                         columns=catalog.columns)
    with pytest.raises(ValueError):
        row_to_column(pd.concat([catalog, short]))
