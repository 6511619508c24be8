"""Linkshelf - collection removal workflow for a bookmarking service.

Deleting a collection cascades through its child collections, memberships,
links, archived assets, search documents and the owner's sidebar and
dashboard layout. Leaving a shared collection removes only the membership.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
