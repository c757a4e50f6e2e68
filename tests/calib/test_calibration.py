import textwrap

import pytest

from varproc.calib.calibration import (
    LikelihoodCalibration,
    NormalizeCalibration,
    load_calibration,
)


CALIBRATION_YAML = textwrap.dedent(
    """
    ProcLikelihood:
      category_index: -1
      pdfs:
        - use_splines: false
          signal: {min: 0.0, width: 1.0, values: [0, 1, 2, 3, 4, 0]}
          background: {min: 0.0, width: 1.0, values: [0, 4, 3, 2, 1, 0]}
        - signal: {min: 0.0, width: 2.0, values: [0, 1, 1, 0]}
          background: {min: 0.0, width: 2.0, values: [0, 1, 1, 0]}
    ProcNormalize:
      category_index: 0
      distr:
        - {min: 0.0, width: 10.0, values: [0, 1, 1, 1, 0]}
    """
)


def test_load_calibration_from_env(tmp_path, monkeypatch):
    yaml_file = tmp_path / "calib.yaml"
    yaml_file.write_text(CALIBRATION_YAML)
    monkeypatch.setenv("VARPROC_CALIBRATION_YAML", str(yaml_file))

    data = load_calibration()

    assert set(data) == {"ProcLikelihood", "ProcNormalize"}


def test_load_calibration_requires_path(monkeypatch):
    monkeypatch.delenv("VARPROC_CALIBRATION_YAML", raising=False)

    with pytest.raises(RuntimeError):
        load_calibration()


def test_likelihood_calibration_from_mapping(tmp_path, monkeypatch):
    monkeypatch.delenv("VARPROC_USE_SPLINES", raising=False)
    monkeypatch.setenv("VARPROC_DEFAULT_BIAS", "2.5")
    yaml_file = tmp_path / "calib.yaml"
    yaml_file.write_text(CALIBRATION_YAML)

    calib = LikelihoodCalibration.from_mapping(
        load_calibration(str(yaml_file))["ProcLikelihood"]
    )

    assert calib.category_index is None
    assert calib.bias == 2.5
    assert [entry.use_splines for entry in calib.pdfs] == [False, True]
    assert calib.pdfs[0].signal.number_of_bins() == 4


def test_use_splines_default_follows_settings(monkeypatch):
    monkeypatch.setenv("VARPROC_USE_SPLINES", "0")
    histogram = {"min": 0.0, "width": 1.0, "values": [0, 1, 0]}

    calib = LikelihoodCalibration.from_mapping(
        {"bias": 1.0, "pdfs": [{"signal": histogram, "background": histogram}]}
    )

    assert calib.pdfs[0].use_splines is False


def test_normalize_calibration_from_mapping():
    calib = NormalizeCalibration.from_mapping(
        {
            "category_index": 0,
            "distr": [{"min": 0.0, "width": 10.0, "values": [0, 1, 1, 1, 0]}],
        }
    )

    assert calib.category_index == 0
    assert len(calib.distr) == 1
    assert calib.distr[0].range.width == 10.0


def test_missing_histogram_keys_raise():
    with pytest.raises(KeyError):
        LikelihoodCalibration.from_mapping({"pdfs": [{"signal": {"min": 0.0}}]})
