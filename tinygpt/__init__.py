"""A small pure-Python transformer forward pass with randomly initialised weights."""

__version__ = "0.1.0"
__all__ = [
    "activations",
    "attention",
    "feedforward",
    "layers",
    "matrix",
    "model",
    "tokenizer",
    "transformer",
]