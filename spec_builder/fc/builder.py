"""
Aliyun Function Compute template builder.

Maps the provider-agnostic spec (service, provider defaults, functions and
their events) onto the Aliyun ROS serverless template vocabulary.
"""

import copy
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..builder import SpecBuilder
from ..core.config import config
from ..core.exceptions import DuplicateTriggerError, InvalidConfigError
from ..utils import attach_if_defined, first_defined, recase_provider_sections

logger = logging.getLogger("spec_builder.fc.builder")

ROS_TEMPLATE_FORMAT_VERSION = "2015-09-01"
ROS_TRANSFORM = "Aliyun::Serverless-2018-04-03"

SERVICE_TYPE = "Aliyun::Serverless::Service"
FUNCTION_TYPE = "Aliyun::Serverless::Function"
CUSTOM_DOMAIN_TYPE = "Aliyun::Serverless::CustomDomain"

DEFAULT_HANDLER = "index.handler"
DEFAULT_INITIALIZER_METHOD = "initializer"
DEFAULT_RUNTIME = "nodejs10"
DEFAULT_CODE_URI = "."
DEFAULT_TIMEOUT = 30
DEFAULT_INIT_TIMEOUT = 3
DEFAULT_MEMORY_SIZE = 512
DEFAULT_CONCURRENCY = 1

ALL_METHODS = ["GET", "PUT", "POST", "DELETE", "HEAD"]

# os / oss / cos are aliases of one trigger, checked in this order.
OBJECT_STORAGE_ALIASES = ("os", "oss", "cos")

LAST_WINS = "last_wins"
REJECT = "reject"


def convert_methods(methods: Any) -> List[str]:
    """
    Convert an http event `method` value to the platform method list.

    "any" (or an omitted method) expands to every supported method, a single
    string becomes a one-element list, and a list is uppercased item by item.
    """
    if methods is None:
        return list(ALL_METHODS)

    if isinstance(methods, str):
        if methods.lower() == "any":
            return list(ALL_METHODS)
        return [methods.upper()]

    if isinstance(methods, (list, tuple)):
        if not methods:
            raise InvalidConfigError("method list must not be empty", field="http.method")
        converted = []
        for method in methods:
            if not isinstance(method, str):
                raise InvalidConfigError(
                    f"method must be a string, got {type(method).__name__}", field="http.method"
                )
            converted.append(method.upper())
        return converted

    raise InvalidConfigError(
        f"method must be a string or a list of strings, got {type(methods).__name__}",
        field="http.method",
    )


def _http_trigger(evt: Dict[str, Any]) -> Dict[str, Any]:
    properties = {
        "AuthType": "ANONYMOUS",
        "Methods": convert_methods(evt.get("method")),
    }
    attach_if_defined(properties, "InvocationRole", evt.get("role"))
    attach_if_defined(properties, "Qualifier", evt.get("version"))
    return {"Type": "HTTP", "Properties": properties}


def _timer_trigger(evt: Dict[str, Any]) -> Dict[str, Any]:
    value = evt.get("value")
    properties = {
        "CronExpression": f"@every {value}" if evt.get("type") == "every" else value,
        "Enable": evt.get("enable") is not False,
        "Payload": evt.get("payload"),
    }
    attach_if_defined(properties, "Qualifier", evt.get("version"))
    return {"Type": "Timer", "Properties": properties}


def _log_trigger(evt: Dict[str, Any]) -> Dict[str, Any]:
    properties = {
        "SourceConfig": {
            "Logstore": evt.get("source"),
        },
        "JobConfig": {
            "MaxRetryTime": first_defined(evt.get("retryTime"), 1),
            "TriggerInterval": first_defined(evt.get("interval"), 30),
        },
        "LogConfig": {
            "Project": evt.get("project"),
            "Logstore": evt.get("log"),
        },
        "Enable": True,
    }
    attach_if_defined(properties, "InvocationRole", evt.get("role"))
    attach_if_defined(properties, "Qualifier", evt.get("version"))
    return {"Type": "Log", "Properties": properties}


def _object_storage_trigger(evt: Dict[str, Any]) -> Dict[str, Any]:
    events = evt.get("events")
    if events is None:
        events = []
    elif not isinstance(events, (list, tuple)):
        events = [events]

    key_filter = _as_mapping(evt.get("filter"))
    properties = {
        "BucketName": evt.get("bucket"),
        "Events": list(events),
        "Filter": {
            "Key": {
                "Prefix": key_filter.get("prefix"),
                "Suffix": key_filter.get("suffix"),
            },
        },
        "Enable": True,
    }
    attach_if_defined(properties, "InvocationRole", evt.get("role"))
    attach_if_defined(properties, "Qualifier", evt.get("version"))
    return {"Type": "OSS", "Properties": properties}


def _mq_trigger(evt: Dict[str, Any]) -> Dict[str, Any]:
    properties = {
        "TopicName": evt.get("topic"),
        "NotifyContentFormat": "JSON",
        "NotifyStrategy": first_defined(evt.get("strategy"), "BACKOFF_RETRY"),
    }
    attach_if_defined(properties, "Region", evt.get("region"))
    attach_if_defined(properties, "FilterTag", evt.get("tags"))
    attach_if_defined(properties, "InvocationRole", evt.get("role"))
    attach_if_defined(properties, "Qualifier", evt.get("version"))
    return {"Type": "MNSTopic", "Properties": properties}


# (event keys, output key, mapper) for families keyed independently of the function.
# The first declared alias of a family wins.
_TRIGGER_FAMILIES: List[Tuple[Tuple[str, ...], str, Callable[[Dict[str, Any]], Dict[str, Any]]]] = [
    (("timer",), "timer", _timer_trigger),
    (("log",), "log", _log_trigger),
    (OBJECT_STORAGE_ALIASES, "oss", _object_storage_trigger),
    (("mq",), "mq", _mq_trigger),
]


def _as_mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _declared(event: Dict[str, Any], family: str) -> Optional[Dict[str, Any]]:
    """Copy of the payload of a trigger family in one event declaration, or None."""
    payload = event.get(family)
    # An empty mapping still declares the trigger; other falsy values do not.
    if not payload and not isinstance(payload, dict):
        return None
    return copy.deepcopy(_as_mapping(payload))


class FCSpecBuilder(SpecBuilder):
    """
    Builds the Aliyun FC (ROS) template from the spec.

    The builder never mutates the origin data; each to_json() call returns
    a freshly constructed template.
    """

    def __init__(self, origin_data: Dict[str, Any], duplicate_policy: Optional[str] = None):
        super().__init__(origin_data)
        self.duplicate_policy = duplicate_policy or config.DUPLICATE_TRIGGER_POLICY
        if self.duplicate_policy not in (LAST_WINS, REJECT):
            raise InvalidConfigError(
                f"unknown duplicate trigger policy: {self.duplicate_policy}",
                field="DUPLICATE_TRIGGER_POLICY",
            )

    def to_json(self) -> Dict[str, Any]:
        provider = self.get_provider()
        service = self.get_service()
        functions = self.get_functions()
        service_name = service.get("name")

        service_properties = {
            "Description": service.get("description"),
            "Role": provider.get("role"),
            "InternetAccess": provider.get("internetAccess"),
        }
        service_properties.update(recase_provider_sections(provider))

        service_resource: Dict[str, Any] = {
            "Type": SERVICE_TYPE,
            "Properties": service_properties,
        }
        template: Dict[str, Any] = {
            "ROSTemplateFormatVersion": ROS_TEMPLATE_FORMAT_VERSION,
            "Transform": ROS_TRANSFORM,
            "Resources": {
                service_name: service_resource,
            },
        }

        # path -> {serviceName, functionName}, filled by http triggers.
        http_routes: Dict[str, Dict[str, str]] = {}

        for fun_key, fun_spec in functions.items():
            fun_spec = fun_spec or {}
            function_name = fun_spec.get("name") or fun_key
            service_resource[function_name] = self._build_function(
                provider, service_name, fun_key, fun_spec, http_routes
            )

        logger.debug(f"Built {len(functions)} function(s) for service {service_name}")

        domain_info = self.get_custom().get("customDomain")
        if domain_info:
            domain_name = domain_info.get("domainName")
            template["Resources"][domain_name] = {
                "Type": CUSTOM_DOMAIN_TYPE,
                "Properties": {
                    "Protocol": "HTTP",
                    "RouteConfig": {
                        "routes": http_routes,
                    },
                },
            }
            logger.debug(f"Custom domain {domain_name} routes {len(http_routes)} path(s)")

        return template

    def _build_function(
        self,
        provider: Dict[str, Any],
        service_name: str,
        fun_key: str,
        fun_spec: Dict[str, Any],
        http_routes: Dict[str, Dict[str, str]],
    ) -> Dict[str, Any]:
        handler = first_defined(fun_spec.get("handler"), DEFAULT_HANDLER)
        initializer = first_defined(
            fun_spec.get("initializer"),
            ".".join(handler.split(".")[:-1]) + "." + DEFAULT_INITIALIZER_METHOD,
        )

        # Provider environment is the base, function entries win.
        environment = {}
        environment.update(copy.deepcopy(provider.get("environment") or {}))
        environment.update(copy.deepcopy(fun_spec.get("environment") or {}))

        function_template: Dict[str, Any] = {
            "Type": FUNCTION_TYPE,
            "Properties": {
                "Description": first_defined(fun_spec.get("description"), ""),
                "Initializer": initializer,
                "Handler": handler,
                "Runtime": first_defined(
                    fun_spec.get("runtime"), provider.get("runtime"), DEFAULT_RUNTIME
                ),
                "CodeUri": first_defined(fun_spec.get("codeUri"), DEFAULT_CODE_URI),
                "Timeout": first_defined(
                    fun_spec.get("timeout"), provider.get("timeout"), DEFAULT_TIMEOUT
                ),
                "InitializationTimeout": first_defined(
                    fun_spec.get("initTimeout"), DEFAULT_INIT_TIMEOUT
                ),
                "MemorySize": first_defined(
                    fun_spec.get("memorySize"), provider.get("memorySize"), DEFAULT_MEMORY_SIZE
                ),
                "EnvironmentVariables": environment,
                "InstanceConcurrency": first_defined(
                    fun_spec.get("concurrency"), DEFAULT_CONCURRENCY
                ),
            },
            "Events": {},
        }

        triggers = function_template["Events"]
        function_name = fun_spec.get("name") or fun_key

        for event in fun_spec.get("events") or []:
            if not isinstance(event, dict):
                logger.warning(f"Ignoring non-mapping event on function {function_name}: {event!r}")
                continue

            evt = _declared(event, "http")
            if evt is not None:
                self._set_trigger(triggers, f"http-{fun_key}", _http_trigger(evt), function_name)
                http_routes[evt.get("path")] = {
                    "serviceName": service_name,
                    "functionName": function_name,
                }

            for aliases, key, mapper in _TRIGGER_FAMILIES:
                for alias in aliases:
                    evt = _declared(event, alias)
                    if evt is not None:
                        self._set_trigger(triggers, key, mapper(evt), function_name)
                        break

        return function_template

    def _set_trigger(
        self,
        triggers: Dict[str, Any],
        key: str,
        trigger: Dict[str, Any],
        function_name: str,
    ) -> None:
        if key in triggers:
            if self.duplicate_policy == REJECT:
                raise DuplicateTriggerError(function_name, key)
            logger.warning(
                f"Trigger {key} declared more than once on function {function_name}; "
                "keeping the last declaration"
            )
        triggers[key] = trigger


def build_fc_template(
    origin_data: Dict[str, Any], duplicate_policy: Optional[str] = None
) -> Dict[str, Any]:
    """Build the FC template for a parsed spec."""
    return FCSpecBuilder(origin_data, duplicate_policy=duplicate_policy).to_json()
