"""Fixed-width unsigned big integers with explicit overflow semantics."""

__version__ = "0.1.0"

__all__ = ["arith", "errors", "modular", "parsing", "uint", "words"]