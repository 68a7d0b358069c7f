"""Smart Kitchen. Record what is in the cupboard, get a recipe for it."""

__version__ = "0.1.0"
