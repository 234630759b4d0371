"""A single transformer block: attention and feed-forward with residuals."""

from __future__ import annotations

import random

from .activations import layer_norm
from .attention import MultiHeadAttention
from .feedforward import FeedForward
from .matrix import Matrix

EPSILON = 1e-5


def residual_add(a: Matrix, b: Matrix) -> Matrix:
    """Return the elementwise sum of two matrices of equal shape."""
    return a + b


class TransformerBlock:
    """Layer norm, multi-head attention and feed-forward with residual links."""

    def __init__(
        self,
        input_dim: int,
        num_heads: int,
        hidden_dim: int,
        rng: random.Random | None = None,
    ) -> None:
        source = random.Random() if rng is None else rng
        self.mha = MultiHeadAttention(input_dim, num_heads, source)
        self.ffn = FeedForward(input_dim, hidden_dim, source)

    def forward(self, input: Matrix) -> Matrix:
        """Run the block on an (input_dim, seq_len) matrix."""
        normed = Matrix(input.rows, input.columns, list(input.data))
        layer_norm(normed, EPSILON)

        attended = residual_add(self.mha.forward(normed), normed)
        layer_norm(attended, EPSILON)

        final = residual_add(self.ffn.forward(attended), attended)
        layer_norm(final, EPSILON)
        return final