"""Tests for the click command-line interface."""

import json
from unittest import mock

from click.testing import CliRunner

from grubdash.infrastructure.cli.main import cli
from tests.fakes import make_dish, make_order


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class TestSeedCheck:

    def test_valid_files(self, tmp_path):
        dishes = _write(tmp_path, "d.json", [make_dish("a").to_dict()])
        orders = _write(tmp_path, "o.json", [make_order("o").to_dict()])
        result = CliRunner().invoke(cli, ["seed", "check", "--dishes", dishes, "--orders", orders])
        assert result.exit_code == 0, result.output
        assert "1 dish(es) OK" in result.output
        assert "1 order(s) OK" in result.output

    def test_invalid_file_fails(self, tmp_path):
        bad = make_order("o").to_dict() | {"dishes": []}
        orders = _write(tmp_path, "o.json", [bad])
        result = CliRunner().invoke(cli, ["seed", "check", "--orders", orders])
        assert result.exit_code == 1
        assert "record 0: Order must include at least one dish" in result.output

    def test_requires_a_file(self):
        result = CliRunner().invoke(cli, ["seed", "check"])
        assert result.exit_code == 2


class TestServe:

    def test_runs_uvicorn_with_factory(self):
        with mock.patch("grubdash.infrastructure.cli.server_commands.uvicorn.run") as run:
            result = CliRunner().invoke(cli, ["serve", "--port", "8123"])
        assert result.exit_code == 0, result.output
        args, kwargs = run.call_args
        assert args == ("grubdash.infrastructure.web.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 8123
