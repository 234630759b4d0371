import random

import pytest

from tinygpt.layers import Embedding, LinearLayer, OutputProjection, TokenOutOfRangeError
from tinygpt.matrix import Matrix


def _identity(n):
    m = Matrix(n, n)
    for i in range(n):
        m[i, i] = 1.0
    return m


def _sample(rows, columns):
    return Matrix(rows, columns, [0.5 * i - 1.0 for i in range(rows * columns)])


def test_linear_layer_shapes_and_init():
    layer = LinearLayer(4, 3, random.Random(1))
    assert (layer.weights.rows, layer.weights.columns) == (3, 4)
    assert (layer.bias.rows, layer.bias.columns) == (3, 1)
    assert all(-0.05 <= w < 0.05 for w in layer.weights.data)
    assert layer.bias.data == [0.0, 0.0, 0.0]


def test_linear_layer_is_deterministic_per_seed():
    a = LinearLayer(5, 2, random.Random(42))
    b = LinearLayer(5, 2, random.Random(42))
    assert a.weights == b.weights


def test_linear_forward_shape():
    layer = LinearLayer(4, 3, random.Random(0))
    out = layer.forward(_sample(4, 6))
    assert (out.rows, out.columns) == (6, 3)


def test_linear_forward_identity_transposes_input():
    layer = LinearLayer(3, 3, random.Random(0))
    layer.weights = _identity(3)
    x = _sample(3, 2)
    assert layer.forward(x) == x.transpose()


def test_linear_forward_adds_bias_per_output():
    layer = LinearLayer(3, 3, random.Random(0))
    layer.weights = _identity(3)
    layer.bias = Matrix(3, 1, [10.0, 20.0, 30.0])
    x = _sample(3, 2)
    out = layer.forward(x)
    for b in range(2):
        for j in range(3):
            assert out[b, j] == x[j, b] + layer.bias.data[j]


def test_embedding_table_init():
    emb = Embedding(7, 4, random.Random(3))
    assert (emb.table.rows, emb.table.columns) == (7, 4)
    assert all(-0.5 <= v < 0.5 for v in emb.table.data)


def test_embed_shape():
    emb = Embedding(10, 6, random.Random(3))
    out = emb.embed([1, 2, 9])
    assert (out.rows, out.columns) == (6, 3)


def test_embed_layout():
    emb = Embedding(3, 2, random.Random(0))
    emb.table = Matrix(3, 2, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    assert emb.embed([1]).data == [1.0, 4.0]


def test_embed_same_token_gives_same_vector():
    emb = Embedding(5, 4, random.Random(9))
    out = emb.embed([2, 2])
    assert out.data[:4] == out.data[4:]


def test_embed_rejects_out_of_range_ids():
    emb = Embedding(5, 2, random.Random(0))
    with pytest.raises(TokenOutOfRangeError):
        emb.embed([5])
    with pytest.raises(IndexError):
        emb.embed([-1])


def test_output_projection_shape():
    proj = OutputProjection(4, 9, random.Random(2))
    logits = proj.forward(_sample(4, 3))
    assert (logits.rows, logits.columns) == (3, 9)


def test_output_projection_identity_transposes_input():
    proj = OutputProjection(3, 3, random.Random(2))
    proj.proj.weights = _identity(3)
    x = _sample(3, 4)
    assert proj.forward(x) == x.transpose()


def test_output_projection_adds_bias_for_single_token():
    proj = OutputProjection(3, 3, random.Random(2))
    proj.proj.weights = _identity(3)
    proj.proj.bias = Matrix(3, 1, [1.0, 2.0, 3.0])
    x = _sample(3, 1)
    logits = proj.forward(x)
    for j in range(3):
        assert logits[0, j] == x[j, 0] + proj.proj.bias.data[j]