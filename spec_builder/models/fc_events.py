"""
Pydantic models for Aliyun Function Compute invocation payloads.

These are the events a deployed function receives at runtime for each
trigger family. The template builder does not produce them; they document
the contract on the function side and validate captured payloads.
"""

import json
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Object storage (OSS)
# =============================================================================


class OSSBucket(BaseModel):
    arn: str
    name: str
    ownerIdentity: str
    virtualBucket: str


class OSSObject(BaseModel):
    deltaSize: int
    eTag: str
    key: str
    size: int


class OSSDetail(BaseModel):
    bucket: OSSBucket
    object: OSSObject
    ossSchemaVersion: str
    ruleId: str


class OSSRequestParameters(BaseModel):
    sourceIPAddress: str


class OSSResponseElements(BaseModel):
    requestId: str


class OSSUserIdentity(BaseModel):
    principalId: str


class SingleOSSEvent(BaseModel):
    eventName: str
    eventSource: str
    eventTime: str
    eventVersion: str
    oss: OSSDetail
    region: str
    requestParameters: OSSRequestParameters
    responseElements: OSSResponseElements
    userIdentity: OSSUserIdentity


class OSSEvent(BaseModel):
    events: List[SingleOSSEvent]


# =============================================================================
# CDN
# =============================================================================


class CDNUserIdentity(BaseModel):
    aliUid: str


class CDNResource(BaseModel):
    domain: str


class CDNEventParameter(BaseModel):
    domain: str
    endTime: int
    fileSize: int
    filePath: str
    startTime: int


class SingleCDNEvent(BaseModel):
    eventName: str
    eventSource: str
    region: str
    eventVersion: str
    eventTime: str
    userIdentity: CDNUserIdentity
    resource: CDNResource
    eventParameter: CDNEventParameter
    traceId: str


class CDNEvent(BaseModel):
    events: List[SingleCDNEvent]


# =============================================================================
# Message queue (MNS topic)
# =============================================================================


class MNSStreamAttrs(BaseModel):
    Extend: str


class MNSStreamEvent(BaseModel):
    """Delivered when the topic notify format is STREAM."""

    body: str
    attrs: MNSStreamAttrs


class MNSJSONEvent(BaseModel):
    """Delivered when the topic notify format is JSON."""

    Context: str
    TopicOwner: str
    Message: str
    Subscriber: str
    PublishTime: int
    SubscriptionName: str
    MessageMD5: str
    TopicName: str
    MessageId: str


MNSEvent = Union[str, MNSStreamEvent, MNSJSONEvent]


def parse_mns_event(raw: Union[str, bytes, Dict[str, Any]]) -> MNSEvent:
    """
    Parse an MNS payload into one of its three shapes.

    SIMPLE format messages arrive as plain text and are returned as str.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")

    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return raw
        if not isinstance(data, dict):
            return raw
    else:
        data = raw

    if "TopicName" in data:
        return MNSJSONEvent.model_validate(data)
    return MNSStreamEvent.model_validate(data)


# =============================================================================
# Log service (SLS)
# =============================================================================


class SLSSource(BaseModel):
    endpoint: str
    projectName: str
    logstoreName: str
    shardId: int
    beginCursor: str
    endCursor: str


class SLSEvent(BaseModel):
    parameter: Dict[str, Any] = Field(default_factory=dict)
    source: SLSSource
    jobName: str
    taskId: str
    cursorTime: int


# =============================================================================
# Timer
# =============================================================================


class TimerInvokeEvent(BaseModel):
    triggerTime: str
    triggerName: str
    payload: str


# =============================================================================
# API gateway
# =============================================================================


class APIGatewayEvent(BaseModel):
    path: str
    httpMethod: str
    headers: Dict[str, Any] = Field(default_factory=dict)
    queryParameters: Dict[str, Any] = Field(default_factory=dict)
    pathParameters: Dict[str, Any] = Field(default_factory=dict)
    body: str = ""
    isBase64Encoded: Literal["true", "false"] = "false"


class APIGatewayResponse(BaseModel):
    """
    Response a function returns to API gateway.

    Use model_dump() to convert to a dict.
    """

    isBase64Encoded: bool = False
    statusCode: int
    headers: Dict[str, Any] = Field(default_factory=dict)
    body: str = ""


# =============================================================================
# Table store
# =============================================================================


class TableStoreRecordInfo(BaseModel):
    Timestamp: int


class TableStorePrimaryKey(BaseModel):
    ColumnName: str
    Value: Any = None


class TableStoreColumn(BaseModel):
    Type: str
    ColumnName: str
    Value: Any = None
    Timestamp: int


class TableStoreRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    Type: str
    Info: TableStoreRecordInfo
    PrimaryKey: List[TableStorePrimaryKey]
    Columns: List[TableStoreColumn] = Field(default_factory=list)


class TableStoreEvent(BaseModel):
    Version: str
    Records: List[TableStoreRecord]
