"""
Nonprofit Directory

This package provides search, filtering, sorting and pagination over a
directory of nonprofit organizations read from a hosted datastore.
"""

__version__ = "0.1.0"
__description__ = "Browse and filter a directory of nonprofit organizations"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "DirectoryApp":
        from .main import DirectoryApp
        return DirectoryApp
    if name == "FilterStateController":
        from .services import FilterStateController
        return FilterStateController
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DirectoryApp",
    "FilterStateController",
]
