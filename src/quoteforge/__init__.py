"""Quote Forge - create and organize original quotes.

Signed-in users group short pieces of text into named collections,
with optional attribution, mood, tags and language metadata.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
