"""
Spec document models.

Describes the parsed f.yml structure consumed by the builders.
Validation is optional: builders work on plain dicts and only the loader
calls validate_spec() when asked to.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.exceptions import InvalidConfigError


class _SpecModel(BaseModel):
    """Unknown keys are kept so newer spec fields pass through."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ProviderConfig(_SpecModel):
    """Service-wide defaults."""

    name: Optional[str] = None
    role: Optional[str] = None
    internetAccess: Optional[bool] = None
    vpcConfig: Optional[Dict[str, Any]] = None
    policies: Optional[Union[str, List[Any], Dict[str, Any]]] = None
    logConfig: Optional[Dict[str, Any]] = None
    nasConfig: Optional[Union[str, Dict[str, Any]]] = None
    runtime: Optional[str] = None
    timeout: Optional[int] = None
    memorySize: Optional[int] = None
    environment: Optional[Dict[str, Any]] = None


class ServiceConfig(_SpecModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class HTTPEvent(_SpecModel):
    path: Optional[str] = None
    method: Optional[Union[str, List[str]]] = None
    role: Optional[str] = None
    version: Optional[str] = None

    @field_validator("method")
    @classmethod
    def _non_empty_methods(cls, value):
        if isinstance(value, list) and not value:
            raise ValueError("method list must not be empty")
        return value


class TimerEvent(_SpecModel):
    type: Optional[str] = None
    value: Optional[str] = None
    enable: Optional[bool] = None
    payload: Optional[Any] = None
    version: Optional[str] = None


class LogEvent(_SpecModel):
    source: Optional[str] = None
    project: Optional[str] = None
    log: Optional[str] = None
    retryTime: Optional[int] = None
    interval: Optional[int] = None
    role: Optional[str] = None
    version: Optional[str] = None


class OSFilter(_SpecModel):
    prefix: Optional[str] = None
    suffix: Optional[str] = None


class OSEvent(_SpecModel):
    bucket: Optional[str] = None
    events: Optional[Union[str, List[str]]] = None
    filter: Optional[OSFilter] = None
    role: Optional[str] = None
    version: Optional[str] = None


class MQEvent(_SpecModel):
    topic: Optional[str] = None
    strategy: Optional[str] = None
    region: Optional[str] = None
    tags: Optional[Union[str, List[str]]] = None
    role: Optional[str] = None
    version: Optional[str] = None


class EventDeclaration(_SpecModel):
    """One entry of a function's `events` list."""

    http: Optional[HTTPEvent] = None
    timer: Optional[TimerEvent] = None
    log: Optional[LogEvent] = None
    os: Optional[OSEvent] = None
    oss: Optional[OSEvent] = None
    cos: Optional[OSEvent] = None
    mq: Optional[MQEvent] = None


class FunctionConfig(_SpecModel):
    name: Optional[str] = None
    handler: Optional[str] = None
    initializer: Optional[str] = None
    runtime: Optional[str] = None
    codeUri: Optional[str] = None
    timeout: Optional[int] = None
    initTimeout: Optional[int] = None
    memorySize: Optional[int] = None
    environment: Optional[Dict[str, Any]] = None
    concurrency: Optional[int] = None
    description: Optional[str] = None
    events: List[EventDeclaration] = Field(default_factory=list)


class CustomDomainConfig(_SpecModel):
    domainName: str = Field(..., min_length=1)
    stage: Optional[str] = None


class CustomConfig(_SpecModel):
    customDomain: Optional[CustomDomainConfig] = None


class SpecDocument(_SpecModel):
    """The whole parsed spec."""

    service: Union[str, ServiceConfig]
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    functions: Dict[str, Optional[FunctionConfig]] = Field(default_factory=dict)
    custom: Optional[CustomConfig] = None

    @field_validator("service")
    @classmethod
    def _non_empty_service(cls, value):
        if isinstance(value, str) and not value:
            raise ValueError("service name must not be empty")
        return value


def validate_spec(origin_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a parsed spec against SpecDocument.

    Returns the origin unchanged; raises InvalidConfigError on the first
    reported problem.
    """
    try:
        SpecDocument.model_validate(origin_data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidConfigError(first["msg"], field=location) from e
    return origin_data
