"""Scaled dot-product attention and multi-head attention."""

from __future__ import annotations

import math
import random

from .activations import softmax
from .layers import LinearLayer
from .matrix import Matrix


def attention_head(q: Matrix, k: Matrix, v: Matrix) -> Matrix:
    """Return ``softmax(q @ k.T / sqrt(k.columns)) @ v``."""
    scores = q @ k.transpose()
    d_k = k.columns
    scale = 1.0 / math.sqrt(d_k) if d_k else math.inf
    scores = scores.scaled(scale)
    softmax(scores)
    return scores @ v


class MultiHeadAttention:
    """Several attention heads whose outputs are concatenated and projected."""

    def __init__(
        self, input_dim: int, num_heads: int, rng: random.Random | None = None
    ) -> None:
        if num_heads < 1:
            raise ValueError(f"need at least one attention head, got {num_heads}")
        source = random.Random() if rng is None else rng
        self.num_heads = num_heads
        self.input_dim = input_dim
        self.head_dim = input_dim // num_heads
        self.wq: list[LinearLayer] = []
        self.wk: list[LinearLayer] = []
        self.wv: list[LinearLayer] = []
        for _ in range(num_heads):
            self.wq.append(LinearLayer(input_dim, self.head_dim, source))
            self.wk.append(LinearLayer(input_dim, self.head_dim, source))
            self.wv.append(LinearLayer(input_dim, self.head_dim, source))
        self.wo = LinearLayer(input_dim, input_dim, source)

    def forward(self, input: Matrix) -> Matrix:
        """Map an (input_dim, seq_len) matrix to an (input_dim, seq_len) matrix."""
        seq_len = input.columns
        head_dim = self.head_dim
        concat = [0.0] * (self.input_dim * seq_len)
        for index, (wq, wk, wv) in enumerate(zip(self.wq, self.wk, self.wv)):
            head = attention_head(
                wq.weights @ input, wk.weights @ input, wv.weights @ input
            )
            for token in range(seq_len):
                src = token * head_dim
                dst = token * self.input_dim + index * head_dim
                concat[dst:dst + head_dim] = head.data[src:src + head_dim]
        output = self.wo.weights @ Matrix(self.input_dim, seq_len, concat)
        rows = output.rows
        bias = self.wo.bias.data
        output.data = [value + bias[k % rows] for k, value in enumerate(output.data)]
        return output