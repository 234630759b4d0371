"""Position-wise two-layer feed-forward network."""

from __future__ import annotations

import math
import random

from .layers import LinearLayer
from .matrix import Matrix


def _softplus(x: float) -> float:
    if x > 0:
        return x + math.log1p(math.exp(-x))
    return math.log1p(math.exp(x))


class FeedForward:
    """Linear, softplus, linear: input_dim -> hidden_dim -> input_dim."""

    def __init__(
        self, input_dim: int, hidden_dim: int, rng: random.Random | None = None
    ) -> None:
        source = random.Random() if rng is None else rng
        self.fc1 = LinearLayer(input_dim, hidden_dim, source)
        self.fc2 = LinearLayer(hidden_dim, input_dim, source)

    def forward(self, input: Matrix) -> Matrix:
        """Map an (input_dim, batch) matrix to an (input_dim, batch) matrix."""
        h1 = self.fc1.weights @ input
        cols = h1.columns
        bias1 = self.fc1.bias.data
        hidden = Matrix(
            h1.rows,
            cols,
            [_softplus(v + bias1[k // cols]) for k, v in enumerate(h1.data)],
        )
        h2 = self.fc2.weights @ hidden
        bias2 = self.fc2.bias.data
        h2.data = [v + bias2[k // cols] for k, v in enumerate(h2.data)]
        return h2