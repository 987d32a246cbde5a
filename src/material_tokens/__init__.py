"""
material_tokens
===============

Does: Root package initializer for the Material token derivation project.
Returns: Re-exports the top-level entry points from `material_tokens.derivation`.
Used by: Applications injecting Material color tokens as stylesheet variables.
"""

from material_tokens.derivation import (
    properties_from_source_color,
    properties_from_theme,
)

__all__: list[str] = ["properties_from_theme", "properties_from_source_color"]
__docformat__ = "google"
