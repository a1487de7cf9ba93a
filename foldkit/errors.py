"""foldkit exceptions.

These are intentionally lightweight so they can be raised from sampling and
orchestration paths without importing any heavier module.
"""


class FoldkitError(Exception):
    """Base class for all foldkit errors."""


class InvalidConfigurationError(FoldkitError, ValueError):
    """Raised when options would cause an out-of-bounds draw or an invalid division."""


class RuleLearningError(FoldkitError, RuntimeError):
    """Raised when association rule learning cannot complete."""
