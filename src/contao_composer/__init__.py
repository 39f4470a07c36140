"""
Contao Composer - Composer integration for legacy Contao installations

Locates the Contao installation root, reads its legacy bootstrap files,
injects implicit requirements and repositories into the root package and
runs the post-install maintenance steps at the right lifecycle events.
"""

__version__ = "0.9.0"
__all__ = ["__version__"]
