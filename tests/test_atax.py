import math

import numpy as np
import pytest

from polykernels.atax import format_output, init_array, kernel_atax, main, sizes
from polykernels.common import Dataset


def test_sizes():
    assert sizes("mini") == (32, 32)
    assert sizes(Dataset.STANDARD).nx == 4000
    assert sizes("extralarge").ny == 100000


def test_init_array():
    a, x = init_array(4, 5)
    assert a.shape == (4, 5)
    assert x.shape == (5,)
    assert x[0] == 0
    assert x[1] == pytest.approx(math.pi)
    assert np.all(a[0, :] == 0)


def test_identity_returns_x():
    x = np.array([1.0, 2.0, 3.0])
    assert np.allclose(kernel_atax(3, 3, np.eye(3), x), x)


def test_rectangular_projection():
    a = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    x = np.array([4.0, 5.0, 6.0])
    y = kernel_atax(2, 3, a, x)
    assert np.allclose(y, [x[0], x[1], 0.0])


def test_kernel_is_linear_in_x():
    a, x = init_array(6, 6)
    base = kernel_atax(6, 6, a, x)
    assert np.allclose(kernel_atax(6, 6, a, 3 * x), 3 * base)


def test_kernel_leaves_input_untouched():
    a, x = init_array(5, 5)
    a_copy, x_copy = a.copy(), x.copy()
    kernel_atax(5, 5, a, x)
    assert np.array_equal(a, a_copy)
    assert np.array_equal(x, x_copy)


def test_kernel_rejects_short_vector():
    a, x = init_array(4, 4)
    with pytest.raises(ValueError):
        kernel_atax(4, 4, a, x[:2])


def test_kernel_rejects_small_matrix():
    a, x = init_array(2, 2)
    with pytest.raises(ValueError):
        kernel_atax(4, 2, a, x)


def test_format_output():
    assert format_output(np.array([1.0, 2.0])) == "1.00 \n2.00 \n"


def test_main_dump(capsys):
    assert main(["--dataset", "mini", "--dump"]) == 0
    captured = capsys.readouterr()
    assert len(captured.err.split()) == sizes("mini").nx