"""Repository file discovery for security analysis, with .gitignore-style filtering."""

__version__ = "0.7.0"
__all__ = ["repo"]