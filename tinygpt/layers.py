"""Linear, embedding and output projection layers."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .matrix import Matrix


class TokenOutOfRangeError(IndexError):
    """Raised when a token id falls outside the embedding vocabulary."""


def _rng(rng: random.Random | None) -> random.Random:
    return random.Random() if rng is None else rng


class LinearLayer:
    """Weights of shape (output_dim, input_dim) and a zero bias."""

    def __init__(
        self, input_dim: int, output_dim: int, rng: random.Random | None = None
    ) -> None:
        source = _rng(rng)
        self.weights = Matrix(
            output_dim,
            input_dim,
            [(source.random() - 0.5) * 0.1 for _ in range(output_dim * input_dim)],
        )
        self.bias = Matrix(output_dim, 1)

    def forward(self, input: Matrix) -> Matrix:
        """Map an (input_dim, batch) matrix to a (batch, output_dim) matrix."""
        output = (self.weights @ input).transpose()
        width = output.columns
        output.data = [
            value + self.bias.data[k % width] for k, value in enumerate(output.data)
        ]
        return output


class Embedding:
    """A randomly initialised lookup table of token vectors."""

    def __init__(
        self, vocab_size: int, embedding_dim: int, rng: random.Random | None = None
    ) -> None:
        source = _rng(rng)
        self.vocab_size = vocab_size
        self.embedding_dim = embedding_dim
        self.table = Matrix(
            vocab_size,
            embedding_dim,
            [source.random() - 0.5 for _ in range(vocab_size * embedding_dim)],
        )

    def embed(self, token_ids: Iterable[int]) -> Matrix:
        """Return an (embedding_dim, len(token_ids)) matrix of token vectors."""
        ids = list(token_ids)
        for token_id in ids:
            if not 0 <= token_id < self.vocab_size:
                raise TokenOutOfRangeError(
                    f"token id {token_id} outside vocabulary of {self.vocab_size}"
                )
        table = self.table.data
        data = [
            table[j * self.vocab_size + token_id]
            for token_id in ids
            for j in range(self.embedding_dim)
        ]
        return Matrix(self.embedding_dim, len(ids), data)


class OutputProjection:
    """Projects hidden states onto vocabulary logits."""

    def __init__(
        self, input_dim: int, vocab_size: int, rng: random.Random | None = None
    ) -> None:
        self.proj = LinearLayer(input_dim, vocab_size, rng)

    def forward(self, input: Matrix) -> Matrix:
        """Map an (input_dim, seq_len) matrix to (seq_len, vocab_size) logits."""
        logits_t = self.proj.weights @ input
        height = logits_t.rows
        bias = self.proj.bias.data
        logits_t.data = [
            value + bias[k % height] for k, value in enumerate(logits_t.data)
        ]
        return logits_t.transpose()