"""Tests for the command line entry point."""

from datetime import date
from unittest.mock import Mock, patch

import pytest
from rich.console import Console

from jwl import main as cli
from jwl.api.authorization import AccessToken
from jwl.api.errors import Unauthorized
from jwl.cli.console import WorklogConsole
from jwl.config import Context, ContextNotFound

CONTEXT = Context(authorization=AccessToken("abc"), jira_domain="https://jira.example.com")


@pytest.fixture
def console():
    return WorklogConsole(
        out=Console(record=True, width=200), err=Console(record=True, stderr=True, width=200)
    )


@pytest.fixture
def manager():
    manager = Mock()
    manager.read_context.return_value = CONTEXT
    return manager


class TestParser:
    """Test argument parsing."""

    def test_add_arguments(self):
        args = cli.build_parser().parse_args(
            ["add", "ISSUE-1", "2h", "-m", "Pairing", "-d", "2023-05-01", "-c", "work"]
        )

        assert args.issue == "ISSUE-1"
        assert args.time_spend == "2h"
        assert args.comment == "Pairing"
        assert args.date == date(2023, 5, 1)
        assert args.context == "work"

    def test_invalid_date_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args(["view", "ISSUE-1", "--date", "01-05-2023"])

        assert exc_info.value.code == 2
        assert "yyyy-mm-dd" in capsys.readouterr().err

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestMain:
    """Test main() dispatch and error reporting."""

    def test_view_defaults_to_today(self, manager, console):
        with patch.object(cli, "view_worklog") as view_worklog, patch.object(
            cli, "today", return_value=date(2023, 5, 1)
        ):
            code = cli.main(["view", "ISSUE-1"], manager=manager, console=console)

        assert code == 0
        manager.read_context.assert_called_once_with(None)
        config, view_context = view_worklog.call_args[0]
        assert config == CONTEXT
        assert view_context == cli.ViewContext(date=date(2023, 5, 1), issue="ISSUE-1")

    def test_add_passes_context(self, manager, console):
        with patch.object(cli, "add_worklog") as add_worklog:
            code = cli.main(
                ["add", "ISSUE-1", "30m", "--date", "2023-05-02", "--context", "work"],
                manager=manager,
                console=console,
            )

        assert code == 0
        manager.read_context.assert_called_once_with("work")
        add_worklog.assert_called_once_with(
            CONTEXT,
            cli.AddContext(date=date(2023, 5, 2), issue="ISSUE-1", comment=None, time_spend="30m"),
        )

    def test_api_error_returns_nonzero(self, manager, console):
        with patch.object(cli, "view_worklog", side_effect=Unauthorized()):
            code = cli.main(["view", "ISSUE-1"], manager=manager, console=console)

        assert code == 1
        assert "not authorized" in console.err.export_text()

    def test_config_error_returns_nonzero(self, manager, console):
        manager.read_context.side_effect = ContextNotFound("work")

        code = cli.main(["add", "ISSUE-1", "2h", "-c", "work"], manager=manager, console=console)

        assert code == 1
        assert "Context `work` was not found" in console.err.export_text()

    def test_config_command_runs_setup(self, manager, console):
        with patch.object(cli, "setup_config") as setup_config:
            code = cli.main(["config"], manager=manager, console=console)

        assert code == 0
        setup_config.assert_called_once_with(manager, console.out)
