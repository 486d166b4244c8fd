import numpy as np
import pytest

from polykernels import two_mm


def test_sizes_presets():
    assert two_mm.sizes("mini") == (32, 32, 32, 32)
    assert two_mm.sizes("STANDARD_DATASET") == (1024, 1024, 1024, 1024)
    assert two_mm.sizes("extralarge").nl == 4000


def test_init_array_constants_and_shapes():
    alpha, beta, a, b, c, d = two_mm.init_array(2, 3, 4, 5)
    assert alpha == 32412
    assert beta == 2123
    assert a.shape == (2, 4)
    assert b.shape == (4, 3)
    assert c.shape == (5, 3)
    assert d.shape == (2, 5)
    assert np.all(a[0] == 0)
    assert np.all(b[0] == 0)


def test_identity_product():
    eye = np.eye(3)
    d = np.full((3, 3), 7.0)
    result = two_mm.kernel_two_mm(3, 3, 3, 3, 2.0, 0.0, eye, eye, eye, d)
    np.testing.assert_allclose(result, 2.0 * eye)


def test_beta_only_scales_d_when_a_is_zero():
    d = np.arange(9, dtype=float).reshape(3, 3)
    zero = np.zeros((3, 3))
    result = two_mm.kernel_two_mm(3, 3, 3, 3, 5.0, 3.0, zero, np.eye(3), np.eye(3), d)
    np.testing.assert_allclose(result, 3.0 * d)


def test_inputs_not_modified():
    _, _, a, b, c, d = two_mm.init_array(4, 4, 4, 4)
    d_before = d.copy()
    two_mm.kernel_two_mm(4, 4, 4, 4, 1.0, 1.0, a, b, c, d)
    np.testing.assert_array_equal(d, d_before)


def test_non_square_shapes():
    result = two_mm.kernel_two_mm(
        2, 3, 4, 5, 1.0, 0.0, np.ones((2, 4)), np.ones((4, 3)), np.ones((3, 5)), np.ones((2, 5))
    )
    assert result.shape == (2, 5)
    np.testing.assert_allclose(result, 12.0)


def test_too_small_array_raises():
    with pytest.raises(ValueError):
        two_mm.kernel_two_mm(
            3, 3, 3, 3, 1.0, 1.0, np.ones((2, 3)), np.ones((3, 3)), np.ones((3, 3)), np.ones((3, 3))
        )


def test_format_output_breaks():
    text = two_mm.format_output(2, np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert text == "1.00 \n2.00 3.00 4.00 \n"


def test_main_dump(capsys):
    assert two_mm.main(["--dataset", "mini", "--dump"]) == 0
    err = capsys.readouterr().err
    assert len(err.split()) == 32 * 32