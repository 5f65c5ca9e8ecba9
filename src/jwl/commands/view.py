"""The ``view`` command: print an issue's worklogs for one day."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..api.worklog_client import WorklogClient
from ..cli.console import WorklogConsole, format_worklog_line
from ..config import Context
from ..domain.models import ViewWorklogDto, WorklogResponse


@dataclass(frozen=True)
class ViewContext:
    date: date
    issue: str

    def to_dto(self) -> ViewWorklogDto:
        return ViewWorklogDto.for_day(self.issue, self.date)


def view_worklog(
    config: Context,
    context: ViewContext,
    client: Optional[WorklogClient] = None,
    console: Optional[WorklogConsole] = None,
) -> List[WorklogResponse]:
    """Fetch the worklogs of ``context.issue`` on ``context.date`` and print them."""
    client = client or WorklogClient(config.jira_domain)
    console = console or WorklogConsole()

    worklogs = client.worklogs(context.to_dto(), config.authorization)
    for worklog in worklogs:
        console.show_line(format_worklog_line(context.issue, worklog))
    return worklogs
