import numpy as np
import pytest

from polykernels import trisolv


def test_sizes_presets():
    assert trisolv.sizes("mini") == (32,)
    assert trisolv.sizes("small").n == 500


def test_init_array():
    a, c = trisolv.init_array(4)
    assert a.shape == (4, 4)
    np.testing.assert_allclose(c, np.arange(4) / 4)
    assert np.count_nonzero(a[0]) == 0


def test_solution_satisfies_lower_system():
    rng = np.random.default_rng(3)
    a = rng.standard_normal((6, 6)) + 6 * np.eye(6)
    c = rng.standard_normal(6)
    x = trisolv.kernel_trisolv(6, a, c)
    np.testing.assert_allclose(np.tril(a) @ x, c, atol=1e-12)


def test_upper_triangle_ignored():
    lower = np.tril(np.arange(1.0, 17.0).reshape(4, 4)) + np.eye(4)
    c = np.ones(4)
    noisy = lower + np.triu(np.full((4, 4), 99.0), 1)
    np.testing.assert_allclose(
        trisolv.kernel_trisolv(4, lower, c), trisolv.kernel_trisolv(4, noisy, c)
    )


def test_identity_returns_rhs():
    c = np.array([2.0, -1.0, 0.5])
    np.testing.assert_allclose(trisolv.kernel_trisolv(3, np.eye(3), c), c)


def test_zero_pivot_gives_nan():
    a, c = trisolv.init_array(4)
    x = trisolv.kernel_trisolv(4, a, c)
    assert x.shape == (4,)
    assert np.count_nonzero(np.isnan(x)) == 4


def test_short_rhs_raises():
    with pytest.raises(ValueError):
        trisolv.kernel_trisolv(3, np.eye(3), np.ones(2))


def test_format_output_no_trailing_newline():
    assert trisolv.format_output(np.array([1.0, 2.0, 3.0])) == "1.00 \n2.00 3.00 "


def test_main_dump(capsys):
    assert trisolv.main(["--dataset", "mini", "--dump"]) == 0
    assert len(capsys.readouterr().err.split()) == 32