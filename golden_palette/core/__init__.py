"""golden_palette.core — Foundation layer.

Contains the colour codec, HSL transforms, palette generator, base colour
library, settings and report builder.
This module has NO dependencies on golden_palette.commands or golden_palette.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
