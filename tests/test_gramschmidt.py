import numpy as np
import pytest

from polykernels.gramschmidt import (
    compare_results,
    format_output,
    format_sections,
    init_array,
    kernel_gramschmidt,
    main,
    sizes,
)


def test_sizes():
    assert sizes("mini") == (32, 32)
    assert sizes("standard") == (512, 512)


def test_init_array_shapes():
    a, r, q = init_array(4, 3)
    assert a.shape == (4, 3)
    assert r.shape == (3, 3)
    assert q.shape == (4, 3)
    assert np.all(a[0] == 0) and np.all(a[:, 0] == 0)
    assert np.all(r[0] == 0) and np.all(q[0] == 0)


def _inputs():
    rng = np.random.default_rng(0)
    a = rng.normal(size=(5, 3))
    r = np.full((3, 3), 7.0)
    q = np.zeros((5, 3))
    return a, r, q


def test_qr_properties():
    a, r, q = _inputs()
    res = kernel_gramschmidt(5, 3, a, r, q)
    assert np.allclose(res.q.T @ res.q, np.eye(3))
    assert np.allclose(res.q @ np.triu(res.r), a)
    assert np.all(np.diag(res.r) > 0)


def test_lower_r_and_inputs_untouched():
    a, r, q = _inputs()
    a_before = a.copy()
    res = kernel_gramschmidt(5, 3, a, r, q)
    assert np.all(res.r[np.tril_indices(3, -1)] == 7.0)
    assert np.array_equal(a, a_before)
    assert np.array_equal(res.a[:, 0], a[:, 0])


def test_shape_error():
    a, r, q = _inputs()
    with pytest.raises(ValueError):
        kernel_gramschmidt(6, 3, a, r, q)


def test_format_output():
    text = format_output(np.array([[1.0]]), np.array([[2.0]]), np.array([[3.0]]))
    assert text == "1.00 \n\n2.00 \n\n3.00 \n\n"


def test_format_sections():
    text = format_sections(np.array([[1.0]]), np.array([[2.0]]), np.array([[3.0]]))
    assert text == "A\n1.00 \nQ\n3.00 \nR\n2.00 \n"


def test_compare_results_within_tolerance():
    assert compare_results(np.zeros((2, 2)), np.zeros((2, 2))) == 0.0
    diff = compare_results(np.array([[1.0, 2.0]]), np.array([[1.0, 2.05]]))
    assert diff == pytest.approx(0.05)


def test_compare_results_mismatch():
    with pytest.raises(ValueError, match=r"\(0, 1\)"):
        compare_results(np.array([[1.0, 2.0]]), np.array([[1.0, 2.5]]))
    with pytest.raises(ValueError):
        compare_results(np.zeros((2, 2)), np.zeros((2, 3)))


def test_main_dump(capsys):
    assert main(["--dataset", "mini", "--dump"]) == 0
    err = capsys.readouterr().err
    assert len(err.split()) == 3 * 32 * 32
    assert "nan" in err