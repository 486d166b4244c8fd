import numpy as np
import pytest

from polykernels.common import Dataset
from polykernels.covariance import (
    format_output,
    init_array,
    kernel_covariance,
    main,
    sizes,
)


@pytest.fixture
def problem():
    return init_array(6, 6)


@pytest.mark.parametrize(
    "dataset, expected",
    [("mini", (32, 32)), (Dataset.SMALL, (500, 500)), ("large", (2000, 2000))],
)
def test_sizes(dataset, expected):
    assert sizes(dataset) == expected


def test_init_array(problem):
    float_n, data = problem
    assert float_n == pytest.approx(1.2)
    assert data.shape == (6, 6)
    assert np.count_nonzero(data[:, 0]) == 0
    assert np.array_equal(data, data.T)


def test_kernel_is_symmetric_and_semidefinite():
    symmat, mean = kernel_covariance(10, 10, *init_array(10, 10))
    assert (symmat.shape, mean.shape) == ((10, 10), (10,))
    assert np.array_equal(symmat, symmat.T)
    assert np.diag(symmat).min() >= 0
    eigenvalues = np.linalg.eigvalsh(symmat)
    assert eigenvalues.min() >= -1e-9 * np.abs(eigenvalues).max()


def test_zero_column_has_no_covariance(problem):
    symmat, mean = kernel_covariance(6, 6, *problem)
    assert mean[0] == 0
    assert np.count_nonzero(symmat[0, :]) == 0
    assert np.count_nonzero(symmat[:, 0]) == 0


def test_scaling_data_scales_covariance(problem):
    float_n, data = problem
    base, _ = kernel_covariance(6, 6, float_n, data)
    doubled, _ = kernel_covariance(6, 6, float_n, data * 2)
    assert np.allclose(doubled, base * 4)


def test_kernel_leaves_input_untouched(problem):
    float_n, data = problem
    original = data.copy()
    kernel_covariance(6, 6, float_n, data)
    assert np.array_equal(data, original)


def test_kernel_rejects_small_data():
    with pytest.raises(ValueError):
        kernel_covariance(6, 6, *init_array(3, 3))


def test_format_output():
    assert format_output(np.array([[2.5]])) == "2.50 \n\n"


def test_main_dump(capsys):
    assert main(["--dataset", "mini", "--dump"]) == 0
    assert len(capsys.readouterr().err.split()) == 32 * 32