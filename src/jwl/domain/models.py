"""Request and response value objects for the worklog API."""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional

from ..api.errors import SerializationError

START_OF_DAY = time(0, 0, 0)
END_OF_DAY = time(23, 59, 59)
# Worklogs are day-granular; noon keeps the date stable across timezones.
WORKLOG_START_TIME = time(12, 0, 0)


def to_epoch_millis(moment: datetime) -> str:
    """Format a timestamp the way Jira's ``startedAfter``/``startedBefore`` expect.

    Precision is whole seconds; the millisecond part is always ``000``.
    """
    return f"{int(moment.timestamp())}000"


def to_jira_timestamp(moment: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.000+0000``."""
    return moment.strftime("%Y-%m-%dT%H:%M:%S.000%z")


@dataclass(frozen=True)
class ViewWorklogDto:
    """Parameters for listing the worklogs of an issue."""

    issue: str
    started_from: Optional[datetime] = None
    started_until: Optional[datetime] = None

    @classmethod
    def for_day(cls, issue: str, day: date) -> "ViewWorklogDto":
        """Build a request bounded to ``day`` (00:00:00 - 23:59:59 UTC)."""
        return cls(
            issue=issue,
            started_from=datetime.combine(day, START_OF_DAY, tzinfo=timezone.utc),
            started_until=datetime.combine(day, END_OF_DAY, tzinfo=timezone.utc),
        )

    def query_params(self) -> Dict[str, str]:
        params = {}
        if self.started_from is not None:
            params["startedAfter"] = to_epoch_millis(self.started_from)
        if self.started_until is not None:
            params["startedBefore"] = to_epoch_millis(self.started_until)
        return params


@dataclass(frozen=True)
class WorklogAddBody:
    """Outbound JSON body for creating a worklog."""

    comment: Optional[str]
    time_spent: str
    started: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comment": self.comment,
            "timeSpent": self.time_spent,
            "started": self.started,
        }


@dataclass(frozen=True)
class CreateWorklogDto:
    """Parameters for creating a worklog on an issue."""

    issue: str
    comment: Optional[str]
    time_spent: str
    started: date

    def to_body(self) -> WorklogAddBody:
        started = datetime.combine(self.started, WORKLOG_START_TIME, tzinfo=timezone.utc)
        return WorklogAddBody(
            comment=self.comment,
            time_spent=self.time_spent,
            started=to_jira_timestamp(started),
        )


@dataclass(frozen=True)
class AuthorResponse:
    display_name: str


@dataclass(frozen=True)
class WorklogResponse:
    """A single worklog as returned by Jira."""

    author: AuthorResponse
    comment: Optional[str]
    time_spent: str

    @classmethod
    def from_dict(cls, data: Any) -> "WorklogResponse":
        if not isinstance(data, dict):
            raise TypeError("worklog entry must be an object")
        comment = data.get("comment")
        time_spent = data["timeSpent"]
        display_name = data["author"]["displayName"]
        if not isinstance(time_spent, str) or not isinstance(display_name, str):
            raise TypeError("timeSpent and author.displayName must be strings")
        if comment is not None and not isinstance(comment, str):
            raise TypeError("comment must be a string or null")
        return cls(
            author=AuthorResponse(display_name=display_name),
            comment=comment,
            time_spent=time_spent,
        )


@dataclass(frozen=True)
class PagedWorklogResponse:
    """First page of an issue's worklogs; paging metadata is not kept."""

    worklogs: List[WorklogResponse]

    @classmethod
    def from_dict(cls, data: Any) -> "PagedWorklogResponse":
        """Parse the ``GET .../worklog`` payload.

        Raises:
            SerializationError: If the payload does not match the expected shape
        """
        try:
            entries = data["worklogs"]
            if not isinstance(entries, list):
                raise TypeError("worklogs must be a list")
            return cls(worklogs=[WorklogResponse.from_dict(entry) for entry in entries])
        except (KeyError, TypeError) as e:
            raise SerializationError() from e
