"""Terminal output using rich."""

from typing import Optional

from rich.console import Console

from ..domain.models import WorklogResponse

NO_COMMENT = "`no comment`"


def format_worklog_line(issue: str, worklog: WorklogResponse) -> str:
    """Render a worklog as ``> ISSUE <Author> `2h` comment``."""
    comment = worklog.comment if worklog.comment is not None else NO_COMMENT
    return f"> {issue} <{worklog.author.display_name}> `{worklog.time_spent}` {comment}"


class WorklogConsole:
    """Plain stdout lines for results, styled stderr lines for errors."""

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None) -> None:
        self.out = out or Console()
        self.err = err or Console(stderr=True)

    def show_line(self, line: str) -> None:
        self.out.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show_error(self, error: str) -> None:
        """Show error message."""
        self.err.print("[red bold]Error:[/red bold] ", end="")
        self.err.print(error, markup=False, highlight=False, emoji=False, soft_wrap=True)
