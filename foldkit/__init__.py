"""foldkit: seeded resampling, cross-validation and itemset summaries."""

from foldkit.core.logging import install_null_handler

install_null_handler()

__version__ = "0.1.0"
