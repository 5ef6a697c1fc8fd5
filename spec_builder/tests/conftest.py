import pytest


@pytest.fixture
def origin_spec():
    """A spec exercising every trigger family and a custom domain."""
    return {
        "service": {"name": "serverless-demo", "description": "demo service"},
        "provider": {
            "name": "aliyun",
            "role": "acs:ram::123:role/fc",
            "internetAccess": True,
            "runtime": "nodejs12",
            "environment": {"STAGE": "prod", "SHARED": "provider"},
            "vpcConfig": {"vpcId": "vpc-1", "vSwitchIds": ["vsw-1"], "securityGroupId": "sg-1"},
            "logConfig": {"project": "demo-project", "logstore": "demo-logstore"},
        },
        "functions": {
            "index": {
                "handler": "index.handler",
                "environment": {"SHARED": "function"},
                "events": [
                    {"http": {"path": "/", "method": ["get", "post"]}},
                    {"timer": {"type": "every", "value": "5m"}},
                ],
            },
            "worker": {
                "name": "demo-worker",
                "handler": "worker.main",
                "timeout": 60,
                "events": [
                    {"http": {"path": "/worker", "method": "any"}},
                    {"oss": {"bucket": "uploads", "events": "oss:ObjectCreated:*",
                             "filter": {"prefix": "in/", "suffix": ".png"}}},
                    {"mq": {"topic": "jobs"}},
                    {"log": {"source": "raw", "project": "demo-project", "log": "processed"}},
                ],
            },
        },
        "custom": {"customDomain": {"domainName": "api.example.com"}},
    }
