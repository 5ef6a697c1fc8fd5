import pytest

from spec_builder.core.exceptions import InvalidConfigError
from spec_builder.parser import load_spec, parse_spec


class TestSpecParser:
    """Tests for the f.yml parser."""

    def test_parse_simple_spec(self):
        """Parse a spec with one http function."""
        content = """
service: serverless-demo

provider:
  name: aliyun
  runtime: nodejs12

functions:
  index:
    handler: index.handler
    events:
      - http:
          path: /
          method: get
"""
        result = parse_spec(content)

        assert result["service"] == "serverless-demo"
        assert result["provider"]["runtime"] == "nodejs12"
        assert result["functions"]["index"]["events"][0]["http"]["path"] == "/"

    def test_env_substitution(self):
        """${VAR} is replaced from the given environment, unknown vars are kept."""
        content = """
service: ${SERVICE_NAME}
provider:
  role: ${UNKNOWN_ROLE}
"""
        result = parse_spec(content, environ={"SERVICE_NAME": "from-env"})

        assert result["service"] == "from-env"
        assert result["provider"]["role"] == "${UNKNOWN_ROLE}"

    def test_env_substitution_from_os_environ(self, monkeypatch):
        monkeypatch.setenv("FC_SERVICE", "os-env")

        assert parse_spec("service: ${FC_SERVICE}")["service"] == "os-env"

    def test_empty_document(self):
        assert parse_spec("") == {}

    def test_non_mapping_document(self):
        with pytest.raises(InvalidConfigError):
            parse_spec("- a\n- b\n")

    def test_yaml_error(self):
        with pytest.raises(InvalidConfigError):
            parse_spec("service: [unclosed")

    def test_validate(self):
        with pytest.raises(InvalidConfigError):
            parse_spec("provider:\n  runtime: nodejs12\n", validate=True)


class TestLoadSpec:
    """Tests for loading spec files."""

    def test_load_spec(self, tmp_path):
        spec_file = tmp_path / "f.yml"
        spec_file.write_text("service: demo\nfunctions:\n  index: {}\n", encoding="utf-8")

        assert load_spec(spec_file) == {"service": "demo", "functions": {"index": {}}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_spec(tmp_path / "missing.yml")
