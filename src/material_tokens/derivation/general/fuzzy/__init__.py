"""
fuzzy package.
==============

Public API for near-miss name suggestions used in error messages.
"""

from .suggest import closest_name, did_you_mean

__all__ = ["closest_name", "did_you_mean"]
