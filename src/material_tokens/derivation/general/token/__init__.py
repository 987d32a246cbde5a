# derivation/general/token/__init__.py
"""
token.
=====

Does: Provide the naming policy shared by all derivers.
Exports: tokenize, camelize, capitalize, compose_token, humanize, contrast_token
Used by: color/derivers and the orchestrator.
"""

from __future__ import annotations

from .naming import (
    camelize,
    capitalize,
    compose_token,
    contrast_token,
    humanize,
    tokenize,
)

__all__ = [
    "tokenize",
    "camelize",
    "capitalize",
    "compose_token",
    "humanize",
    "contrast_token",
]
