"""fenview — validating FEN parser with a PyQt6 board viewer."""

__version__ = "0.1.0"
