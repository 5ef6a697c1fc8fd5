"""
Helpers shared by the platform builders.
"""

from typing import Any, Dict, MutableMapping

# Provider sections recased before they reach the service resource.
PROVIDER_RECASED_FIELDS = {
    "vpcConfig": "VpcConfig",
    "policies": "Policies",
    "logConfig": "LogConfig",
    "nasConfig": "NasConfig",
}


def _upper_first(key: str) -> str:
    return key[:1].upper() + key[1:]


def uppercase_object_key(value: Any) -> Any:
    """
    Uppercase the first letter of every mapping key, recursively.

    Lists are walked element by element; scalars (and None) are returned as-is.
    New containers are returned, the input is never modified.
    """
    if isinstance(value, dict):
        return {
            _upper_first(key) if isinstance(key, str) else key: uppercase_object_key(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [uppercase_object_key(item) for item in value]
    return value


def recase_provider_sections(provider: Dict[str, Any]) -> Dict[str, Any]:
    """Recase the four object-valued provider sections, keyed by output property name."""
    return {
        prop: uppercase_object_key(provider.get(field))
        for field, prop in PROVIDER_RECASED_FIELDS.items()
    }


def attach_if_defined(target: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Set target[key] only when value is not None."""
    if value is not None:
        target[key] = value


def first_defined(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None
