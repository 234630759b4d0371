import math

import pytest

from tinygpt.activations import layer_norm, softmax, softmax_row
from tinygpt.matrix import Matrix


def test_softmax_rows_sum_to_one():
    m = Matrix(3, 4, [0.1 * i - 0.4 for i in range(12)])
    softmax(m)
    for row in range(3):
        assert math.isclose(sum(m.data[row * 4:(row + 1) * 4]), 1.0)


def test_softmax_preserves_order():
    m = Matrix(1, 4, [2.0, -1.0, 0.5, 3.0])
    softmax(m)
    assert m.data[3] > m.data[0] > m.data[2] > m.data[1]


def test_softmax_uniform_row():
    m = Matrix(1, 4, [7.0, 7.0, 7.0, 7.0])
    softmax(m)
    assert m.data == pytest.approx([0.25] * 4)


def test_softmax_shift_invariant():
    a = Matrix(1, 3, [1.0, 2.0, 3.0])
    b = Matrix(1, 3, [101.0, 102.0, 103.0])
    softmax(a)
    softmax(b)
    assert a.data == pytest.approx(b.data)


def test_softmax_large_values_do_not_overflow():
    m = Matrix(1, 2, [1000.0, 1000.0])
    softmax(m)
    assert all(math.isfinite(v) for v in m.data)
    assert math.isclose(sum(m.data), 1.0)


def test_softmax_row_touches_only_its_row():
    m = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
    softmax_row(m, 1)
    assert m.data[:2] == [1.0, 2.0]
    assert math.isclose(m.data[2] + m.data[3], 1.0)


def test_softmax_row_out_of_range():
    with pytest.raises(IndexError):
        softmax_row(Matrix(2, 2), 2)


def test_layer_norm_zero_mean_unit_variance():
    m = Matrix(2, 5, [1.0, 4.0, -2.0, 8.0, 0.5, 10.0, 20.0, 30.0, 40.0, 50.0])
    layer_norm(m, 1e-5)
    for row in range(2):
        values = m.data[row * 5:(row + 1) * 5]
        mean = sum(values) / 5
        variance = sum((v - mean) ** 2 for v in values) / 5
        assert mean == pytest.approx(0.0, abs=1e-9)
        assert variance == pytest.approx(1.0, rel=1e-3)


def test_layer_norm_constant_row_becomes_zero():
    m = Matrix(1, 3, [4.0, 4.0, 4.0])
    layer_norm(m)
    assert m.data == [0.0, 0.0, 0.0]


def test_layer_norm_preserves_order():
    m = Matrix(1, 3, [3.0, -1.0, 2.0])
    layer_norm(m)
    assert m.data[0] > m.data[2] > m.data[1]