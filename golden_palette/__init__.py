"""golden_palette — golden-ratio colour palette derivation from a single base colour."""

__version__ = '0.1.0'
