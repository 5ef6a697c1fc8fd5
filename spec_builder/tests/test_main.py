import pytest
import yaml

from spec_builder import main as main_module
from spec_builder.main import generate_template, main

SPEC = """
service:
  name: demo
  description: demo service
provider:
  name: aliyun
  runtime: nodejs12
functions:
  index:
    handler: index.handler
    events:
      - http:
          path: /
          method: any
      - timer:
          type: every
          value: 1h
      - timer:
          value: "0 0 * * *"
custom:
  customDomain:
    domainName: api.example.com
"""


@pytest.fixture(autouse=True)
def _keep_test_logging(monkeypatch):
    """Leave pytest's logging handlers in place."""
    monkeypatch.setattr(main_module, "setup_logging", lambda *args, **kwargs: None)


def _write_spec(tmp_path):
    spec_file = tmp_path / "f.yml"
    spec_file.write_text(SPEC, encoding="utf-8")
    return spec_file


class TestGenerateTemplate:
    """Tests for end-to-end template generation."""

    def test_writes_template(self, tmp_path):
        spec_file = _write_spec(tmp_path)
        output = tmp_path / "out" / "template.yml"

        generate_template(spec_file, output)

        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        function = data["Resources"]["demo"]["index"]
        assert function["Properties"]["Runtime"] == "nodejs12"
        assert function["Events"]["timer"]["Properties"]["CronExpression"] == "0 0 * * *"
        assert data["Resources"]["api.example.com"]["Properties"]["RouteConfig"]["routes"] == {
            "/": {"serviceName": "demo", "functionName": "index"}
        }

    def test_dry_run_prints(self, tmp_path, capsys):
        spec_file = _write_spec(tmp_path)
        output = tmp_path / "template.yml"

        generate_template(spec_file, output, dry_run=True)

        assert not output.exists()
        assert "Aliyun::Serverless::Function" in capsys.readouterr().out


class TestMain:
    """Tests for the command line entry point."""

    def test_json_output(self, tmp_path):
        spec_file = _write_spec(tmp_path)
        output = tmp_path / "template.json"

        code = main(["--spec", str(spec_file), "--output", str(output), "--format", "json"])

        assert code == 0
        assert output.read_text(encoding="utf-8").lstrip().startswith("{")

    def test_reject_duplicates(self, tmp_path, capsys):
        spec_file = _write_spec(tmp_path)

        code = main(
            [
                "--spec",
                str(spec_file),
                "--output",
                str(tmp_path / "template.yml"),
                "--reject-duplicates",
            ]
        )

        assert code == 1
        assert "Duplicate trigger 'timer'" in capsys.readouterr().err

    def test_missing_spec(self, tmp_path, capsys):
        code = main(["--spec", str(tmp_path / "missing.yml"), "--output", str(tmp_path / "t.yml")])

        assert code == 1
        assert "Spec file not found" in capsys.readouterr().err
