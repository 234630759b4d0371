"""Whitespace tokenizer and sinusoidal positional encodings."""

from __future__ import annotations

import math
import re

from .matrix import Matrix

MAX_TOKEN_LENGTH = 100
MAX_TOKENS = 100

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


def tokenize(text: str) -> list[int]:
    """Split ``text`` on whitespace; each token's id is its length in bytes."""
    return [len(word.encode("utf-8")) for word in _WHITESPACE.split(text) if word]


def positional_encoding(max_len: int, dim: int) -> Matrix:
    """Return a ``max_len`` x ``dim`` matrix of sine/cosine position encodings."""
    encoding = Matrix(max_len, dim)
    for pos in range(max_len):
        for i in range(dim):
            angle = pos / 10000.0 ** ((2 * (i // 2)) / dim)
            encoding[pos, i] = math.sin(angle) if i % 2 == 0 else math.cos(angle)
    return encoding