"""SerialDeck - multi-session serial port monitor for the terminal."""

__version__ = "0.1.0"
