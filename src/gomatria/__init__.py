"""gomatria: score text under letter-value ciphers and look values back up."""

__version__ = "0.3.0"
