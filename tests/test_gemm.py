import numpy as np
import pytest

from polykernels import gemm


def test_sizes():
    assert gemm.sizes("mini") == (32, 32, 32)
    assert gemm.sizes("LARGE_DATASET").ni == 2000


def test_init_constants_and_shapes():
    alpha, beta, c, a, b = gemm.init_array(3, 4, 5)
    assert alpha == 32412
    assert beta == 2123
    assert c.shape == (3, 4)
    assert a.shape == (3, 5)
    assert b.shape == (5, 4)
    assert np.allclose(a[0], 0.0)


def test_identity_a():
    c = np.arange(4, dtype=float).reshape(2, 2)
    b = np.array([[1.0, 2.0], [3.0, 4.0]])
    result = gemm.kernel_gemm(2, 2, 2, 3.0, 2.0, c, np.eye(2), b)
    assert np.allclose(result, 2.0 * c + 3.0 * b)
    assert np.array_equal(c, np.arange(4, dtype=float).reshape(2, 2))


def test_zero_alpha_scales_c():
    c = np.ones((3, 3))
    result = gemm.kernel_gemm(2, 2, 2, 0.0, 5.0, c, np.ones((3, 3)), np.ones((3, 3)))
    assert result.shape == (2, 2)
    assert np.allclose(result, 5.0)


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        gemm.kernel_gemm(3, 3, 3, 1.0, 1.0, np.zeros((3, 3)), np.zeros((2, 3)), np.zeros((3, 3)))


def test_format_output():
    c = np.array([[1.0, 2.0], [3.0, 4.0]])
    assert gemm.format_output(2, c) == "1.00 \n2.00 3.00 4.00 \n"


def test_main_dump_counts_values(capsys):
    assert gemm.main(["--dataset", "mini", "--dump"]) == 0
    assert len(capsys.readouterr().err.split()) == 32 * 32