import numpy as np
import pytest

from polykernels import bicg


def test_sizes_presets():
    assert bicg.sizes("mini") == (32, 32)
    assert bicg.sizes("extralarge") == (100000, 100000)


def test_init_array():
    a, r, p = bicg.init_array(3, 4)
    assert a.shape == (3, 4)
    assert r.shape == (3,)
    assert p.shape == (4,)
    assert p[1] == pytest.approx(np.pi)
    assert r[2] == pytest.approx(2 * np.pi)
    assert np.all(a[0] == 0)


def test_identity_matrix_passes_vectors_through():
    r = np.array([1.0, -2.0, 3.0])
    p = np.array([4.0, 5.0, 6.0])
    s, q = bicg.kernel_bicg(3, 3, np.eye(3), p, r)
    np.testing.assert_allclose(s, r)
    np.testing.assert_allclose(q, p)


def test_non_square_shapes():
    s, q = bicg.kernel_bicg(2, 3, np.ones((2, 3)), np.ones(3), np.array([1.0, 2.0]))
    assert s.shape == (3,)
    assert q.shape == (2,)
    np.testing.assert_allclose(s, 3.0)
    np.testing.assert_allclose(q, 3.0)


def test_transpose_symmetry():
    a, r, p = bicg.init_array(4, 4)
    s1, q1 = bicg.kernel_bicg(4, 4, a, p, r)
    s2, q2 = bicg.kernel_bicg(4, 4, a.T.copy(), r, p)
    np.testing.assert_allclose(s1, q2)
    np.testing.assert_allclose(q1, s2)


def test_short_vector_raises():
    with pytest.raises(ValueError):
        bicg.kernel_bicg(3, 3, np.eye(3), np.ones(2), np.ones(3))


def test_format_output():
    text = bicg.format_output(np.array([1.0, 2.0]), np.array([3.0]))
    assert text == "1.00 \n2.00 3.00 \n\n"


def test_main_dump(capsys):
    assert bicg.main(["--dataset", "mini", "--dump"]) == 0
    assert len(capsys.readouterr().err.split()) == 64