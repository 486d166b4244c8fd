import numpy as np
import pytest

from polykernels.dynprog import format_output, init_array, kernel_dynprog, main, sizes


def test_sizes_follow_presets():
    assert sizes("mini") == (10, 32)
    assert sizes("STANDARD_DATASET") == (10000, 50)
    assert sizes("extralarge").length == 500


def test_init_array_pattern():
    c, w = init_array(6)
    assert c.shape == (6, 6) and w.shape == (6, 6)
    assert set(np.unique(c).tolist()) <= {0, 1}
    assert np.all(c[1::2, 1::2] == 1)
    assert np.all(c[0::2, :] == 0)
    # |i - j| < length, so the truncated quotient is always zero.
    assert np.all(w == 0)


def test_kernel_with_custom_weights():
    c = np.full((3, 3), 9, dtype=np.int32)
    w = np.array([[0, 1, 2], [0, 0, 3], [0, 0, 0]], dtype=np.int32)
    result = kernel_dynprog(2, 3, c, w)
    assert result.c[0, 1] == 1
    assert result.c[0, 2] == 3
    assert result.out == 6
    assert result.c[1, 2] == w[1, 2]


def test_kernel_ignores_initial_table():
    w = np.array([[0, 4, 5], [0, 0, 1], [0, 0, 0]], dtype=np.int32)
    first = kernel_dynprog(1, 3, np.zeros((3, 3), dtype=np.int32), w)
    second = kernel_dynprog(1, 3, np.full((3, 3), 77, dtype=np.int32), w)
    assert first.out == second.out
    assert np.array_equal(first.c, second.c)


def test_out_scales_with_steps():
    w = np.triu(np.ones((5, 5), dtype=np.int32), 1)
    one = kernel_dynprog(1, 5, np.zeros((5, 5), dtype=np.int32), w)
    many = kernel_dynprog(7, 5, np.zeros((5, 5), dtype=np.int32), w)
    assert many.out == 7 * one.out


def test_wraps_like_int32():
    length = 34
    w = np.triu(np.ones((length, length), dtype=np.int32), 1)
    result = kernel_dynprog(1, length, np.zeros((length, length), dtype=np.int32), w)
    assert result.out == 0
    assert result.c.dtype == np.int32


def test_zero_steps_keeps_table():
    c = np.full((2, 2), 5, dtype=np.int32)
    result = kernel_dynprog(0, 2, c, np.zeros((2, 2), dtype=np.int32))
    assert result.out == 0
    assert np.array_equal(result.c, c)


def test_bad_shapes_and_length():
    with pytest.raises(ValueError):
        kernel_dynprog(1, 4, np.zeros((3, 3)), np.zeros((4, 4)))
    with pytest.raises(ValueError):
        kernel_dynprog(1, 0, np.zeros((0, 0)), np.zeros((0, 0)))


def test_format_output():
    assert format_output(-12) == "-12 \n"


def test_main_dump(capsys):
    assert main(["--dataset", "mini", "--dump"]) == 0
    assert capsys.readouterr().err == "0 \n"