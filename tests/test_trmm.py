import numpy as np
import pytest

from polykernels.trmm import format_output, init_array, kernel_trmm, main, sizes


def test_sizes_presets():
    assert sizes("extralarge") == (4000,)
    with pytest.raises(ValueError):
        sizes("nope")


def test_init_array():
    alpha, a, b = init_array(4)
    assert alpha == 32412.0
    assert a.shape == (4, 4)
    assert np.array_equal(a, b)
    assert a[3, 2] == pytest.approx(6 / 4)


def test_worked_example_reads_updated_row():
    a = np.array([[0.0, 0.0], [1.0, 0.0]])
    b = np.array([[1.0, 2.0], [3.0, 4.0]])
    result = kernel_trmm(2, 1.0, a, b)
    assert np.allclose(result, np.array([[1.0, 2.0], [4.0, 8.0]]))


def test_zero_alpha_leaves_b():
    _, a, b = init_array(6)
    assert np.allclose(kernel_trmm(6, 0.0, a, b), b)


def test_upper_triangular_a_leaves_b():
    rng = np.random.default_rng(5)
    a = np.triu(rng.random((5, 5)))
    b = rng.random((5, 5))
    assert np.allclose(kernel_trmm(5, 3.0, a, b), b)


def test_first_row_unchanged_and_inputs_untouched():
    alpha, a, b = init_array(8)
    before = b.copy()
    result = kernel_trmm(8, alpha, a, b)
    assert np.array_equal(result[0], before[0])
    assert np.array_equal(b, before)


def test_too_small_raises():
    with pytest.raises(ValueError):
        kernel_trmm(3, 1.0, np.zeros((2, 2)), np.zeros((3, 3)))


def test_format_output_pinned():
    assert format_output(np.array([[0.0]])) == "0.00 \n\n"


def test_main_dumps_all_values(capsys):
    assert main(["--dataset", "mini", "--dump"]) == 0
    assert len(capsys.readouterr().err.split()) == 32 * 32