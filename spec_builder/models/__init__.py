"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .fc_events import (
    APIGatewayEvent,
    APIGatewayResponse,
    CDNEvent,
    MNSJSONEvent,
    MNSStreamEvent,
    OSSEvent,
    SLSEvent,
    TableStoreEvent,
    TimerInvokeEvent,
)
from .spec import (
    CustomDomainConfig,
    EventDeclaration,
    FunctionConfig,
    ProviderConfig,
    ServiceConfig,
    SpecDocument,
    validate_spec,
)

__all__ = [
    "APIGatewayEvent",
    "APIGatewayResponse",
    "CDNEvent",
    "MNSJSONEvent",
    "MNSStreamEvent",
    "OSSEvent",
    "SLSEvent",
    "TableStoreEvent",
    "TimerInvokeEvent",
    "CustomDomainConfig",
    "EventDeclaration",
    "FunctionConfig",
    "ProviderConfig",
    "ServiceConfig",
    "SpecDocument",
    "validate_spec",
]
