"""End-to-end text generation with a single randomly initialised block."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from .layers import Embedding, OutputProjection, TokenOutOfRangeError
from .matrix import Matrix
from .tokenizer import positional_encoding, tokenize
from .transformer import TransformerBlock

MAX_SEQUENCE_LENGTH = 32
_WORD_BUDGET = 32

VOCAB: tuple[str, ...] = (
    "the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog",
    "hello", "world", "a", "b", "c", "d", "e", "f", "g", "h", "i", "j",
    "k", "l", "m", "n", "o", "p", "q", "r", "s", "t", "u", "v", "w", "x", "y", "z",
    "[PAD]", "[UNK]", "[SEP]", "[CLS]", ".", ",", "!", "?", "-", "+", "*", "(", ")",
)


class SequenceTooLongError(ValueError):
    """Raised when the input holds more tokens than the model accepts."""


def run_transformer_model(
    vocab: Sequence[str],
    input_text: str,
    embedding_dim: int = 768,
    hidden_dim: int = 768,
    num_heads: int = 96,
    rng: random.Random | None = None,
) -> str:
    """Run ``input_text`` through the model and return the predicted words.

    Each predicted word is followed by a single space.
    """
    source = random.Random() if rng is None else rng
    vocab_size = len(vocab)

    token_ids = tokenize(input_text)
    seq_len = len(token_ids)
    if seq_len > MAX_SEQUENCE_LENGTH:
        raise SequenceTooLongError("Sequence too long.")
    if not seq_len:
        return ""

    embedding = Embedding(vocab_size, embedding_dim, source)
    embedded = embedding.embed(token_ids)
    positions = positional_encoding(seq_len, embedding_dim)
    embedded = Matrix(
        embedded.rows,
        embedded.columns,
        [a + b for a, b in zip(embedded.data, positions.data)],
    )

    block = TransformerBlock(embedding_dim, num_heads, hidden_dim, source)
    hidden = block.forward(embedded)

    logits = OutputProjection(embedding_dim, vocab_size, source).forward(hidden)
    text = "".join(f"{vocab[logits.argmax_row(row)]} " for row in range(logits.rows))
    return text[: seq_len * _WORD_BUDGET - 1]


def main(argv: Sequence[str] | None = None) -> int:
    """Read one line from standard input and print the model's output."""
    parser = argparse.ArgumentParser(
        prog="tinygpt", description="Run a tiny transformer over a line of text."
    )
    parser.add_argument("--embedding-dim", type=int, default=768)
    parser.add_argument("--hidden-dim", type=int, default=768)
    parser.add_argument("--heads", type=int, default=96)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    print("Enter your input: ", end="", flush=True)
    line = sys.stdin.readline()
    text = line[:-1] if line.endswith("\n") else line

    try:
        output = run_transformer_model(
            VOCAB,
            text,
            args.embedding_dim,
            args.hidden_dim,
            args.heads,
            rng=random.Random(args.seed),
        )
    except SequenceTooLongError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Model run failed.")
        return 0
    except TokenOutOfRangeError:
        print("Error: Token ID out of bounds")
        return 1

    print(f"Model output: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())