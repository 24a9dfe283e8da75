import numpy as np
import pytest

from polykernels.datamining import (
    dump_correlation,
    dump_covariance,
    init_correlation,
    init_covariance,
    kernel_correlation,
    kernel_covariance,
    run_correlation,
    run_covariance,
)


def test_init_correlation_shape_and_first_column():
    float_n, data = init_correlation(3, 5)
    assert float_n == 5.0
    assert data.shape == (5, 3)
    assert np.array_equal(data[:, 0], np.arange(5.0))


def test_init_rejects_empty():
    with pytest.raises(ValueError):
        init_correlation(0, 4)
    with pytest.raises(ValueError):
        init_covariance(3, 0)


def test_correlation_of_init_data_is_all_ones():
    # Every column of the initial data is a positive multiple of the row index.
    float_n, data = init_correlation(6, 8)
    corr = kernel_correlation(float_n, data)
    assert np.allclose(corr, 1.0)


def test_correlation_matches_numpy_on_random_data():
    rng = np.random.default_rng(7)
    data = rng.normal(size=(50, 4)) * 3.0
    corr = kernel_correlation(50.0, data)
    assert np.allclose(corr, np.corrcoef(data, rowvar=False))
    assert np.allclose(corr, corr.T)


def test_correlation_small_deviation_column_is_uncorrelated():
    data = np.column_stack([np.arange(10.0), np.full(10, 4.0)])
    corr = kernel_correlation(10.0, data)
    assert corr[0, 1] == pytest.approx(0.0)
    assert corr[1, 1] == 1.0


def test_correlation_leaves_input_untouched():
    float_n, data = init_correlation(4, 4)
    before = data.copy()
    kernel_correlation(float_n, data)
    assert np.array_equal(data, before)


def test_covariance_matches_numpy():
    rng = np.random.default_rng(3)
    data = rng.normal(size=(30, 5))
    cov = kernel_covariance(30.0, data)
    assert np.allclose(cov, np.cov(data, rowvar=False))


def test_covariance_of_init_data_first_row_is_zero():
    float_n, data = init_covariance(4, 6)
    assert np.all(data[0] == 0.0)
    cov = kernel_covariance(float_n, data)
    assert np.allclose(cov[0], 0.0)
    assert np.allclose(cov, cov.T)


def test_dump_layout():
    dump = dump_covariance(np.zeros((5, 5)))
    assert list(dump) == ["cov"]
    assert dump["cov"].count("\n") == 2
    assert dump["cov"].split() == ["0.00"] * 25


def test_dump_correlation_key():
    dump = dump_correlation(np.eye(2))
    assert dump["corr"].split() == ["1.00", "0.00", "0.00", "1.00"]


def test_run_correlation_mini():
    dump = run_correlation("mini")
    values = [float(v) for v in dump["corr"].split()]
    assert len(values) == 28 * 28
    assert all(v == pytest.approx(1.0) for v in values)


def test_run_covariance_mini_entry_count():
    dump = run_covariance("mini")
    assert len(dump["cov"].split()) == 28 * 28


def test_run_rejects_unknown_dataset():
    with pytest.raises(ValueError):
        run_covariance("enormous")