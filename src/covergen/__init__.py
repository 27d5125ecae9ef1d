"""Covergen: deterministic placeholder covers for catalog records."""

__version__ = "0.1.0"

from covergen.render.generator import CoverGenerator, generate_cover

__all__ = ["CoverGenerator", "generate_cover", "__version__"]
