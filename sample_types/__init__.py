"""
sample_types - Demonstration value and entity types.

A small set of object shapes: an identified entity with a read-only
name, a free-form description, a capability contract, a two-dimensional
point and an immutable titled description pair.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
