import json
import logging

import yaml

from spec_builder.core import logging_config
from spec_builder.core.config import DEFAULT_LOGGING_CONFIG as BUNDLED_LOGGING_CONFIG


def _record(**extra):
    record = logging.LogRecord(
        name="spec_builder.test",
        level=logging.WARNING,
        pathname="test_path.py",
        lineno=10,
        msg="Trigger %s declared twice",
        args=("timer",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_custom_json_formatter_fields():
    log_json = json.loads(logging_config.CustomJsonFormatter().format(_record()))

    assert log_json["message"] == "Trigger timer declared twice"
    assert log_json["level"] == "WARNING"
    assert log_json["logger"] == "spec_builder.test"
    assert "_time" in log_json


def test_custom_json_formatter_includes_extra():
    log_json = json.loads(
        logging_config.CustomJsonFormatter().format(_record(function_name="index"))
    )

    assert log_json["function_name"] == "index"


def test_setup_logging_missing_file_falls_back(tmp_path):
    logging_config.setup_logging(str(tmp_path / "missing.yml"))


def test_setup_logging_substitutes_level(tmp_path, monkeypatch):
    config_file = tmp_path / "logging.yml"
    config_file.write_text(
        """
version: 1
disable_existing_loggers: false
loggers:
  spec_builder.logging_test:
    level: ${LOG_LEVEL}
""",
        encoding="utf-8",
    )
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    logging_config.setup_logging(str(config_file))
    assert logging.getLogger("spec_builder.logging_test").level == logging.ERROR

    logging_config.setup_logging(str(config_file), level="DEBUG")
    assert logging.getLogger("spec_builder.logging_test").level == logging.DEBUG


def test_bundled_config_uses_json_formatter():
    """The console handler emits one JSON object per line."""
    with open(BUNDLED_LOGGING_CONFIG, encoding="utf-8") as f:
        bundled = yaml.safe_load(f)

    handler = bundled["handlers"]["console"]
    assert handler["formatter"] == "json"
    assert (
        bundled["formatters"]["json"]["()"]
        == "spec_builder.core.logging_config.CustomJsonFormatter"
    )
