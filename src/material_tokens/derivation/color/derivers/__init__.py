"""
derivers package.
=================

Public API of the token derivers. Each deriver is a pure function of its
inputs and returns a fresh dict of token → color string.
"""

from .custom_color import (
    DuplicateCustomColorError,
    custom_role_token,
    derive_custom_palette_properties,
    derive_custom_scheme_properties,
    derive_custom_scheme_set,
    ensure_unique_custom_names,
    palette_from_custom_color,
)
from .palette import derive_palette_properties, resolve_palette
from .rgb import rgb_properties
from .scheme import derive_scheme_properties, derive_scheme_set
from .surface import (
    TintTableError,
    check_tint_table,
    derive_surface_container_properties,
    derive_surface_container_set,
    derive_surface_tint_properties,
    derive_surface_tint_set,
)

__all__ = [
    "resolve_palette",
    "derive_palette_properties",
    "derive_scheme_properties",
    "derive_scheme_set",
    "DuplicateCustomColorError",
    "ensure_unique_custom_names",
    "palette_from_custom_color",
    "derive_custom_palette_properties",
    "custom_role_token",
    "derive_custom_scheme_properties",
    "derive_custom_scheme_set",
    "TintTableError",
    "check_tint_table",
    "derive_surface_container_properties",
    "derive_surface_container_set",
    "derive_surface_tint_properties",
    "derive_surface_tint_set",
    "rgb_properties",
]
