import numpy as np
import pytest

from polykernels import gemver


def test_sizes():
    assert gemver.sizes("mini") == (32,)
    assert gemver.sizes("extralarge").n == 100000


def test_init_uses_integer_quotient():
    alpha, beta, a, u1, v1, u2, v2, w, x, y, z = gemver.init_array(4)
    assert (alpha, beta) == (43532, 12313)
    assert np.allclose(u1, [0, 1, 2, 3])
    assert np.allclose(u2[:3], 0.0)
    assert u2[3] == 0.5
    assert np.allclose(w, 0.0) and np.allclose(x, 0.0)
    assert a.shape == (4, 4)


def test_identity_matrix_case():
    n = 3
    zeros = np.zeros(n)
    y = np.ones(n)
    z = np.array([1.0, 2.0, 3.0])
    a, x, w = gemver.kernel_gemver(n, 2.0, 1.0, np.eye(n), zeros, zeros, zeros, zeros, zeros, zeros, y, z)
    assert np.allclose(a, np.eye(n))
    assert np.allclose(x, y + z)
    assert np.allclose(w, 2.0 * (y + z))


def test_rank_one_update():
    n = 2
    zeros = np.zeros(n)
    e0 = np.array([1.0, 0.0])
    e1 = np.array([0.0, 1.0])
    base = np.zeros((n, n))
    a, _x, _w = gemver.kernel_gemver(n, 1.0, 1.0, base, e0, e1, zeros, zeros, zeros, zeros, zeros, zeros)
    assert a[0, 1] == 1.0
    assert a.sum() == 1.0
    assert np.array_equal(base, np.zeros((n, n)))


def test_short_vector_rejected():
    v = np.zeros(3)
    with pytest.raises(ValueError):
        gemver.kernel_gemver(3, 1.0, 1.0, np.eye(3), v, v, v, np.zeros(2), v, v, v, v)


def test_format_output_no_trailing_newline():
    assert gemver.format_output(np.array([1.0, 2.0])) == "1.00 \n2.00 "


def test_main_dump_counts_values(capsys):
    assert gemver.main(["--dataset", "mini", "--dump"]) == 0
    assert len(capsys.readouterr().err.split()) == 32