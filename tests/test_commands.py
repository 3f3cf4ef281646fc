"""
Tests for the command entry point and the server command.
"""
from unittest.mock import patch

from taskflow.__main__ import build_parser, main
from taskflow.commands.server import ServerCommand


def test_server_arguments():
    args = build_parser().parse_args(["server", "--port", "9000", "--no-seed", "--log-level", "debug"])

    assert args.command == "server"
    assert args.port == 9000
    assert args.no_seed is True
    assert args.log_level == "debug"


def test_main_without_command_prints_help(capsys):
    assert main([]) == 1
    assert "COMMAND" in capsys.readouterr().out


@patch("taskflow.commands.server.setup_logging")
@patch("taskflow.commands.server.uvicorn.Server")
def test_server_command_runs_uvicorn(mock_server, mock_setup_logging):
    args = build_parser().parse_args(["server", "--port", "9000", "--no-seed"])

    with ServerCommand(args) as cmd:
        exit_code = cmd.run()

    assert exit_code == 0
    mock_setup_logging.assert_called_once()
    config = mock_server.call_args[0][0]
    assert config.port == 9000
    assert cmd.app.state.settings.seed_sample_data is False
    mock_server.return_value.run.assert_called_once()


@patch("taskflow.commands.server.setup_logging")
@patch("taskflow.commands.server.uvicorn.Server")
def test_main_reports_failures(mock_server, mock_setup_logging):
    mock_server.return_value.run.side_effect = RuntimeError("boom")
    assert main(["server"]) == 1
