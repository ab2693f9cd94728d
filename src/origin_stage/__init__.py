"""Origin Stage: guess whether content was made by an AI or a human."""

__version__ = "0.1.0"
