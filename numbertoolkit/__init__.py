"""Number utilities: unit conversions, arithmetic checks, sequences and text patterns."""

__version__ = "0.1.0"
__all__ = ["arith", "cli", "patterns", "units"]