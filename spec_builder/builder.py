"""
Spec builder base.

Wraps the parsed serverless spec (f.yml) and exposes normalized accessors
for the platform-specific builders.
"""

from typing import Any, Dict


class SpecBuilder:
    """
    Read-only view over the raw spec.

    Subclasses implement to_json() to produce a platform template.
    """

    def __init__(self, origin_data: Dict[str, Any]):
        self.origin_data = origin_data or {}

    def get_provider(self) -> Dict[str, Any]:
        return self.origin_data.get("provider") or {}

    def get_service(self) -> Dict[str, Any]:
        """Service section; `service: name` shorthand is expanded to a mapping."""
        service = self.origin_data.get("service")
        if isinstance(service, str):
            return {"name": service}
        return service or {}

    def get_functions(self) -> Dict[str, Any]:
        return self.origin_data.get("functions") or {}

    def get_custom(self) -> Dict[str, Any]:
        return self.origin_data.get("custom") or {}

    def to_json(self) -> Dict[str, Any]:
        raise NotImplementedError
