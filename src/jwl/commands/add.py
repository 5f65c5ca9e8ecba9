"""The ``add`` command: create a worklog."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..api.worklog_client import WorklogClient
from ..config import Context
from ..domain.models import CreateWorklogDto


@dataclass(frozen=True)
class AddContext:
    date: date
    issue: str
    comment: Optional[str]
    time_spend: str

    def to_dto(self) -> CreateWorklogDto:
        return CreateWorklogDto(
            issue=self.issue,
            comment=self.comment,
            time_spent=self.time_spend,
            started=self.date,
        )


def add_worklog(
    config: Context, context: AddContext, client: Optional[WorklogClient] = None
) -> None:
    client = client or WorklogClient(config.jira_domain)
    client.create_worklog(context.to_dto(), config.authorization)
