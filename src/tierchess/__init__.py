"""tierchess: chess rules engine with a ten-tier computer opponent."""

__version__ = "0.1.0"
