"""
Template renderer.

Serialize a built template to YAML or JSON. Unset (None) properties are
dropped, the way the deployment tooling expects optional fields to be absent.
"""

import json
from typing import Any

import yaml

from .core.exceptions import InvalidConfigError

FORMATS = ("yaml", "json")


def strip_undefined(value: Any) -> Any:
    """Recursively drop mapping entries whose value is None."""
    if isinstance(value, dict):
        return {key: strip_undefined(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [strip_undefined(item) for item in value]
    return value


def render_template(template: dict, fmt: str = "yaml") -> str:
    """
    Render a template.

    Args:
        template: result of a builder's to_json()
        fmt: "yaml" or "json"
    """
    data = strip_undefined(template)

    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    raise InvalidConfigError(f"unsupported output format: {fmt}", field="format")
