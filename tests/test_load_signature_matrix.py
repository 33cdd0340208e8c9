"""Tests for the signature matrix and mean exposure loaders."""

import importlib

import pandas as pd
import pytest

from sigmutsim import locations
from sigmutsim.load_signature_matrix import load_process_weights
from sigmutsim.load_signature_matrix import load_signature_matrix


@pytest.fixture
def signature_file(tmp_path):
    location = tmp_path / "signatures.txt"
    pd.DataFrame({
        "Type": ["A[C>A]A", "A[C>A]C"],
        "SBS1": [0.25, 0.75],
        "SBS5": [0.5, 0.5],
    }).to_csv(location, sep="\t", index=False)
    return location


def test_load_signature_matrix(signature_file):
    W = load_signature_matrix(signature_file)
    assert W.index.name == "type"
    assert W.index.tolist() == ["A[C>A]A", "A[C>A]C"]
    assert W.columns.tolist() == ["SBS1", "SBS5"]


def test_load_signature_matrix_mutation_type_column(tmp_path):
    location = tmp_path / "signatures.txt"
    pd.DataFrame({"MutationType": ["A[C>A]A"], "SBS1": [1.0]}).to_csv(
        location, sep="\t", index=False)
    assert load_signature_matrix(location).index.name == "type"


def test_load_signature_matrix_subset(signature_file):
    W = load_signature_matrix(signature_file, signatures=["SBS5"])
    assert W.columns.tolist() == ["SBS5"]

    with pytest.raises(ValueError, match="SBS2"):
        load_signature_matrix(signature_file, signatures=["SBS2"])


def test_load_signature_matrix_errors(tmp_path):
    with pytest.raises(ValueError, match="does not exist"):
        load_signature_matrix(tmp_path / "missing.txt")

    location = tmp_path / "bad.txt"
    pd.DataFrame({"Context": ["ACA"], "SBS1": [1.0]}).to_csv(
        location, sep="\t", index=False)
    with pytest.raises(ValueError, match="Type"):
        load_signature_matrix(location)


def test_load_process_weights(tmp_path):
    location = tmp_path / "hmean.txt"
    pd.DataFrame({"SBS1": [0.3, 0.1], "SBS5": [0.7, 0.9]},
                 index=["Breast", "Lung"]).to_csv(location, sep="\t")

    h = load_process_weights("Lung", location)
    assert h.name == "Lung"
    assert h.to_dict() == {"SBS1": 0.1, "SBS5": 0.9}

    with pytest.raises(ValueError, match="Skin"):
        load_process_weights("Skin", location)


def test_check_data_file(tmp_path):
    present = tmp_path / "present.txt"
    present.write_text("x")
    assert locations.check_data_file(present) == present

    with pytest.raises(FileNotFoundError, match="absent.txt"):
        locations.check_data_file(tmp_path / "absent.txt")


def test_list_data_files():
    assert set(locations.list_data_files()) == {"cosmic_signatures",
                                                "mean_exposures"}


def test_load_process_weights_default_location(monkeypatch, tmp_path):
    module = importlib.import_module("sigmutsim.load_signature_matrix")

    location = tmp_path / "hmean_breast_lung_skin_pancr.txt"
    pd.DataFrame({"SBS1": [0.3], "SBS13": [0.7]},
                 index=["Breast"]).to_csv(location, sep="\t")
    monkeypatch.setattr(module, "location_mean_exposures", location)

    h = load_process_weights("Breast")
    assert h.to_dict() == {"SBS1": 0.3, "SBS13": 0.7}


def test_load_process_weights_default_location_missing(monkeypatch,
                                                        tmp_path):
    module = importlib.import_module("sigmutsim.load_signature_matrix")

    monkeypatch.setattr(module, "location_mean_exposures",
                        tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        load_process_weights("Breast")
