"""Create and maintain local bare mirrors of Git repositories."""

__version__ = "0.0.3"
__all__ = ["__version__"]