# tinygpt

A small transformer forward pass in plain Python, with no third-party
dependencies. It splits a line of text on whitespace, embeds the tokens, adds
sinusoidal positional encodings, and runs one transformer block. The block
applies layer normalization, multi-head self-attention, a softplus
feed-forward network and residual connections. It then projects the result
onto a vocabulary. For each position, the output is the word with the highest
score.

All weights are initialized at random, so the output is not a meaningful
prediction. The package shows how the pieces of a forward pass fit together.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tinygpt
```

The command prints `Enter your input: `, reads one line from standard input
and runs the model on it. It prints `Model output: ` followed by the predicted
words. The command uses a built-in vocabulary of 49 entries (`tinygpt.model.VOCAB`).

Options:

- `--embedding-dim N`: embedding size (default 768)
- `--hidden-dim N`: feed-forward hidden size (default 768)
- `--heads N`: number of attention heads (default 96)
- `--seed N`: seed for weight initialization, for reproducible runs

If the input has more than 32 tokens, the command prints an error and
`Model run failed.`. A token's id is its length in bytes. If a token is 49 or
more bytes long, it falls outside the vocabulary: the command prints
`Error: Token ID out of bounds` and exits with status 1. At the default sizes
a pure-Python forward pass can take a while to finish.

## Library use

```python
import random

from tinygpt.model import run_transformer_model, SequenceTooLongError

vocab = ["the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog"]
rng = random.Random(0)

try:
    text = run_transformer_model(vocab, "the quick brown fox", 16, 16, 4, rng)
    print(text)
except SequenceTooLongError:
    print("input has more than 32 tokens")
```

`run_transformer_model` returns one word per input token, and a single space
follows each word. Input with no tokens gives an empty string. A token whose
length is not below `len(vocab)` raises
`tinygpt.layers.TokenOutOfRangeError`.

The building blocks can also be used on their own:

- `tinygpt.matrix.Matrix`: a dense row-major matrix with `m[row, col]`
  indexing. It supports `a @ b`, `a + b`, `scaled`, `transpose`,
  `argmax_row` and `format`. A shape mismatch raises `MatrixShapeError`.
- `tinygpt.activations`: `softmax_row`, `softmax` and `layer_norm`. Each one
  changes a matrix in place, row by row.
- `tinygpt.tokenizer`: `tokenize` and `positional_encoding`.
- `tinygpt.layers`: `LinearLayer`, `Embedding` and `OutputProjection`.
- `tinygpt.attention`: `attention_head` and `MultiHeadAttention`. Each head
  has size `input_dim // num_heads`.
- `tinygpt.feedforward.FeedForward`
- `tinygpt.transformer`: `residual_add` and `TransformerBlock`.

Each layer takes an optional `random.Random` for weight initialization. Pass
a seeded generator to get reproducible runs.

## What it does not do

Nothing here trains a model or loads or saves weights. The model also does
not generate text past the input's length. Each run builds fresh random
weights and makes a single forward pass.