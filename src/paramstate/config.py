"""
Framework configuration for paramstate.

Holds the process-wide settings the registry falls back on when a caller
does not pass them explicitly: where the descriptor table lives and how
display names are looked up.
"""

from typing import Callable, Optional, Tuple

# Token that marks a display name as a template for a string-resource name
DISPLAY_NAME_SUBSTITUTION_TOKEN = "{0}"

# Template used when the caller wants localized display names but names none
DEFAULT_DISPLAY_NAME_TEMPLATE = "PARAM_DISPLAY_NAME_{0}"

DEFAULT_DESCRIPTOR_PACKAGE = "paramstate.data"
DEFAULT_DESCRIPTOR_RESOURCE = "ParameterTypeInfo.txt"
DEFAULT_DISPLAY_NAMES_RESOURCE = "DisplayNames.json"

StringResourceLookup = Callable[[str], Optional[str]]


def _no_string_resources(resource_name: str) -> Optional[str]:
    return None


_descriptor_resource: Tuple[str, str] = (DEFAULT_DESCRIPTOR_PACKAGE, DEFAULT_DESCRIPTOR_RESOURCE)
_string_resource_lookup: StringResourceLookup = _no_string_resources


def set_descriptor_resource(package: str, resource: str) -> None:
    """Point the registry at a different packaged descriptor table.

    Args:
        package: Importable package that ships the resource
        resource: File name of the tab-delimited table inside the package
    """
    global _descriptor_resource
    _descriptor_resource = (package, resource)


def get_descriptor_resource() -> Tuple[str, str]:
    """Get the (package, resource) pair of the descriptor table."""
    return _descriptor_resource


def set_string_resource_lookup(lookup: Optional[StringResourceLookup]) -> None:
    """Set the lookup used to resolve templated display names.

    Passing None restores the lookup that always misses.
    """
    global _string_resource_lookup
    _string_resource_lookup = lookup if lookup is not None else _no_string_resources


def get_string_resource_lookup() -> StringResourceLookup:
    """Get the current string-resource lookup."""
    return _string_resource_lookup
