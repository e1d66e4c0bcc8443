"""
Tests for the management CLI.
"""

from unittest.mock import patch

from typer.testing import CliRunner

from cli import app

runner = CliRunner()


class TestCli:
    def test_tables_lists_declarations(self):
        result = runner.invoke(app, ["tables"])
        assert result.exit_code == 0
        for name in ("users", "stores", "brands"):
            assert name in result.output

    def test_tables_describes_one(self):
        result = runner.invoke(app, ["tables", "brands"])
        assert result.exit_code == 0
        assert "Brands Management" in result.output

    def test_tables_unknown(self):
        result = runner.invoke(app, ["tables", "orders"])
        assert result.exit_code == 1
        assert "Unknown admin table" in result.output

    def test_db_init(self):
        result = runner.invoke(app, ["db-init"])
        assert result.exit_code == 0
        assert "users" in result.output

    def test_serve_uses_configured_port(self):
        with patch("uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--port", "9001"])
        assert result.exit_code == 0
        run.assert_called_once_with("rest_api.main:app", host="0.0.0.0", port=9001, reload=False)

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
