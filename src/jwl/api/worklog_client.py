"""Jira worklog API client."""

from typing import List, Optional

import requests
import structlog

from ..domain.models import (
    CreateWorklogDto,
    PagedWorklogResponse,
    ViewWorklogDto,
    WorklogResponse,
)
from .authorization import Authorization, authorize
from .errors import InvalidBaseUrl, NotFound, SerializationError, Unauthorized, UnknownError

logger = structlog.get_logger(__name__)

REQUEST_TIMEOUT = 30

# Raised by requests while preparing a request from a bad base url.
_URL_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
)


class WorklogClient:
    """Lists and creates worklogs on a single Jira domain."""

    def __init__(self, domain: str, session: Optional[requests.Session] = None) -> None:
        """Initialize worklog client.

        Args:
            domain: Jira base URL, e.g. ``https://example.atlassian.net``
            session: HTTP session to use, a new one by default
        """
        self.domain = domain.rstrip("/")
        self.session = session or requests.Session()

    def _worklog_url(self, issue: str) -> str:
        return f"{self.domain}/rest/api/2/issue/{issue}/worklog"

    def _send(self, request: requests.Request) -> requests.Response:
        prepared = self.session.prepare_request(request)
        logger.debug("worklog_request", method=prepared.method, url=prepared.url)
        response = self.session.send(prepared, timeout=REQUEST_TIMEOUT)
        logger.debug(
            "worklog_response",
            method=prepared.method,
            url=prepared.url,
            status_code=response.status_code,
        )
        return response

    @staticmethod
    def _check_status(response: requests.Response, issue: str) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        if status == 404:
            raise NotFound("issue", issue)
        if status in (401, 403):
            raise Unauthorized()
        raise UnknownError()

    def worklogs(
        self, dto: ViewWorklogDto, authorization: Authorization
    ) -> List[WorklogResponse]:
        """Get the worklogs of an issue, optionally bounded by start time.

        Args:
            dto: Issue and optional time window
            authorization: Credentials for the request

        Returns:
            Worklogs in the order returned by Jira (first page only)

        Raises:
            InvalidBaseUrl: If the domain cannot be used to build a request
            NotFound: If the issue does not exist or is not visible
            Unauthorized: On 401/403
            SerializationError: If the response body has an unexpected shape
            UnknownError: On any other transport or status failure
        """
        request = requests.Request(
            "GET", self._worklog_url(dto.issue), params=dto.query_params()
        )
        authorize(request, authorization)

        try:
            response = self._send(request)
        except _URL_ERRORS as e:
            logger.error("worklog_request_failed", domain=self.domain, error=str(e))
            raise InvalidBaseUrl(self.domain) from e
        except requests.RequestException as e:
            logger.error("worklog_request_failed", domain=self.domain, error=str(e))
            raise UnknownError() from e

        self._check_status(response, dto.issue)

        try:
            payload = response.json()
        except ValueError as e:
            raise SerializationError() from e

        worklogs = PagedWorklogResponse.from_dict(payload).worklogs
        logger.debug("worklogs_fetched", issue=dto.issue, count=len(worklogs))
        return worklogs

    def create_worklog(self, dto: CreateWorklogDto, authorization: Authorization) -> None:
        """Create a worklog on an issue.

        Any transport failure, including an unusable domain, is reported as
        ``UnknownError``. The response body is not read.

        Args:
            dto: Worklog to create
            authorization: Credentials for the request
        """
        request = requests.Request(
            "POST",
            self._worklog_url(dto.issue),
            headers={"Content-Type": "application/json"},
            json=dto.to_body().to_dict(),
        )
        authorize(request, authorization)

        try:
            response = self._send(request)
        except requests.RequestException as e:
            logger.error("worklog_request_failed", domain=self.domain, error=str(e))
            raise UnknownError() from e

        self._check_status(response, dto.issue)
        logger.debug("worklog_created", issue=dto.issue, time_spent=dto.time_spent)
