"""
kba_plugin

Top-level package for the KBA data plugin.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; the kernel and ORM models are imported from submodules.
