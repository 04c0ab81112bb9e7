"""cooklist: shopping lists and recipe output for Cooklang recipes."""

__version__ = "0.1.0"
