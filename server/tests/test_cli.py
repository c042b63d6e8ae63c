"""Tests for the stitch CLI."""

import json
from unittest.mock import patch

from typer.testing import CliRunner

from stitch_cli.main import app
from stitch_server.config import RemoteConfig
from stitch_server.core.exceptions import UpstreamError
from stitch_server.core.optimizer import RemoteOptimizer

runner = CliRunner()

REMOTE_CONFIG = RemoteConfig(
    endpoint="https://llm.example.com/v1/chat/completions", api_key="nvapi-1234567890"
)


def test_optimize_local_json():
    result = runner.invoke(app, ["optimize", "An app for marathon runners", "--local", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["original"] == "An app for marathon runners"
    assert data["category"] == "high-level"
    assert data["optimized"].endswith("clear call-to-action elements.")


def test_optimize_local_text():
    result = runner.invoke(app, ["optimize", "Change the colors to blue", "--local"])

    assert result.exit_code == 0
    assert "Optimized (local, theming):" in result.stdout
    assert "Ensure all elements maintain visual consistency" in result.stdout
    assert "Improvements:" in result.stdout


def test_optimize_blank_prompt():
    result = runner.invoke(app, ["optimize", "   "])

    assert result.exit_code == 1
    assert "prompt is required" in result.output


def test_optimize_remote(mock_provider, reply):
    remote = RemoteOptimizer(mock_provider(content=reply(optimized="Remote X", category="detailed")))

    with patch("stitch_cli.main.get_remote_config", return_value=REMOTE_CONFIG), \
         patch.object(RemoteOptimizer, "from_credentials", return_value=remote) as mock_factory:
        result = runner.invoke(app, ["optimize", "Make the homepage better", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["optimized"] == "Remote X"
    assert mock_factory.call_args.kwargs["api_key"] == "nvapi-1234567890"


def test_optimize_fallback_reports_reason(mock_provider):
    error = UpstreamError("NVIDIA API error: 500 Internal Server Error", status_code=500)
    remote = RemoteOptimizer(mock_provider(error=error))

    with patch("stitch_cli.main.get_remote_config", return_value=REMOTE_CONFIG), \
         patch.object(RemoteOptimizer, "from_credentials", return_value=remote):
        result = runner.invoke(app, ["optimize", "Make the homepage better"])

    assert result.exit_code == 0
    assert "Model call failed, used local rules instead" in result.output
    assert "500 Internal Server Error" in result.output
    assert "Optimized (local, detailed):" in result.output


def test_optimize_local_flag_skips_remote():
    with patch("stitch_cli.main.get_remote_config") as mock_config:
        result = runner.invoke(app, ["optimize", "Tea shop", "--local"])

    assert result.exit_code == 0
    mock_config.assert_not_called()


def test_config_not_set():
    with patch("stitch_cli.main.get_remote_config", return_value=None):
        result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert "not set" in result.stdout


def test_config_masks_key():
    with patch("stitch_cli.main.get_remote_config", return_value=REMOTE_CONFIG):
        result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert "✓ NVIDIA_API_KEY" in result.stdout
    assert "https://llm.example.com/v1/chat/completions" in result.stdout
    assert "nvapi-12..." in result.stdout
    assert "nvapi-1234567890" not in result.stdout
