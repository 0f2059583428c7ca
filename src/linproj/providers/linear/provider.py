"""Linear provider adapter over the public GraphQL API."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from linproj.contracts.config import ApiKeyAuth, OAuthAuth
from linproj.contracts.exceptions import AuthenticationError, ProviderError
from linproj.contracts.issue import Issue, IssueUpdateInput, Label, Project, Team, User, WorkflowState
from linproj.contracts.provider import Provider
from linproj.providers.linear import queries

_LOG = logging.getLogger(__name__)

LINEAR_API_URL = "https://api.linear.app/graphql"

_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})
_AUTH_STATUS_CODES = frozenset({401, 403})


class LinearProvider(Provider):
    def __init__(
        self,
        *,
        auth: ApiKeyAuth | OAuthAuth,
        endpoint: str = LINEAR_API_URL,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._auth = auth
        self._endpoint = endpoint
        self._max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> LinearProvider:
        self._client = httpx.AsyncClient(
            headers={
                "Content-Type": "application/json",
                "Authorization": self._auth.authorization_header(),
            },
            timeout=httpx.Timeout(30.0),
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_issue(self, identifier: str) -> Issue | None:
        try:
            data = await self._call_with_retry(
                "get_issue", lambda: self._graphql(queries.GET_ISSUE, {"identifier": identifier})
            )
        except ProviderError as exc:
            # Linear reports unknown identifiers as a GraphQL error rather than null.
            if not isinstance(exc, AuthenticationError) and "Entity not found" in str(exc):
                return None
            raise
        node = data.get("issue")
        if node is None:
            return None
        return self._validate(Issue, node)

    async def get_teams(self) -> list[Team]:
        data = await self._call_with_retry("get_teams", lambda: self._graphql(queries.GET_TEAMS, {}))
        nodes = self._require_list(self._require_dict(data, "teams"), "nodes")
        return [self._validate(Team, node) for node in nodes]

    async def get_workflow_states(self, team_id: str) -> list[WorkflowState]:
        data = await self._call_with_retry(
            "get_workflow_states", lambda: self._graphql(queries.GET_WORKFLOW_STATES, {"teamId": team_id})
        )
        team = data.get("team")
        if not isinstance(team, dict):
            raise ProviderError("Team not found")
        nodes = self._require_list(self._require_dict(team, "states"), "nodes")
        return [self._validate(WorkflowState, node) for node in nodes]

    async def get_labels(self, team_id: str) -> list[Label]:
        data = await self._call_with_retry(
            "get_labels", lambda: self._graphql(queries.GET_LABELS, {"teamId": team_id})
        )
        team = data.get("team")
        if not isinstance(team, dict):
            raise ProviderError("Team not found")
        nodes = self._require_list(self._require_dict(team, "labels"), "nodes")
        return [self._validate(Label, node) for node in nodes]

    async def get_viewer(self) -> User:
        data = await self._call_with_retry("get_viewer", lambda: self._graphql(queries.GET_VIEWER, {}))
        return self._validate(User, self._require_dict(data, "viewer"))

    async def get_user_by_email(self, email: str) -> User | None:
        data = await self._call_with_retry(
            "get_user_by_email", lambda: self._graphql(queries.GET_USER_BY_EMAIL, {"email": email})
        )
        nodes = self._require_list(self._require_dict(data, "users"), "nodes")
        if not nodes:
            return None
        return self._validate(User, nodes[0])

    async def get_projects(self) -> list[Project]:
        data = await self._call_with_retry("get_projects", lambda: self._graphql(queries.GET_PROJECTS, {}))
        nodes = self._require_list(self._require_dict(data, "projects"), "nodes")
        return [self._validate(Project, node) for node in nodes]

    async def update_issue(self, issue_id: str, input: IssueUpdateInput) -> Issue:
        variables = {"id": issue_id, "input": input.to_variables()}
        _LOG.debug("Updating issue %s with %s", issue_id, variables["input"])
        data = await self._call_with_retry("update_issue", lambda: self._graphql(queries.UPDATE_ISSUE, variables))
        payload = self._require_dict(data, "issueUpdate")
        if not payload.get("success"):
            raise ProviderError("Failed to update issue")
        return self._validate(Issue, self._require_dict(payload, "issue"))

    async def _graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")

        response = await self._client.post(self._endpoint, json={"query": query, "variables": variables})
        if response.status_code in _AUTH_STATUS_CODES:
            raise AuthenticationError(
                f"Authentication failed ({response.status_code}); check your API key or run `linproj auth login`"
            )
        if response.status_code in _RETRYABLE_STATUS_CODES:
            raise httpx.HTTPStatusError(
                f"HTTP error: {response.status_code}", request=response.request, response=response
            )

        payload = self._json_or_none(response)
        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            raise self._error_from_graphql(errors)
        if response.is_error:
            raise ProviderError(f"HTTP error: {response.status_code} {response.reason_phrase}")

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise ProviderError("No data returned from API")
        return data

    async def _call_with_retry(
        self,
        operation: str,
        fn: Callable[[], Awaitable[dict[str, Any]]],
    ) -> dict[str, Any]:
        for attempt in range(self._max_retries + 1):
            try:
                return await fn()
            except httpx.TransportError as exc:
                if attempt == self._max_retries:
                    raise ProviderError(f"Network error during {operation}: {exc}") from exc
                await self._sleep_backoff(attempt, operation)
            except httpx.HTTPStatusError as exc:
                if attempt == self._max_retries:
                    raise ProviderError(
                        f"HTTP error: {exc.response.status_code} {exc.response.reason_phrase}"
                    ) from exc
                retry_after = self._parse_retry_after(exc.response)
                if retry_after > 0:
                    await asyncio.sleep(retry_after)
                await self._sleep_backoff(attempt, operation)

        raise ProviderError(f"Operation failed after retries: {operation}")  # pragma: no cover

    async def _sleep_backoff(self, attempt: int, operation: str) -> None:
        seconds = min(4.0, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.warning("Retrying Linear operation", extra={"operation": operation, "attempt": attempt + 1})
        await asyncio.sleep(seconds)

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 0.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 0.0

    @staticmethod
    def _json_or_none(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_from_graphql(errors: list[Any]) -> ProviderError:
        messages: list[str] = []
        auth_failure = False
        for error in errors:
            if not isinstance(error, dict):
                continue
            messages.append(str(error.get("message", "")))
            extensions = error.get("extensions")
            if isinstance(extensions, dict):
                code = str(extensions.get("code") or extensions.get("type") or "").lower()
                if "authentication" in code or "forbidden" in code:
                    auth_failure = True
        message = "; ".join(m for m in messages if m) or "GraphQL request failed"
        if auth_failure:
            return AuthenticationError(message)
        return ProviderError(message)

    @staticmethod
    def _validate(model: type[Any], node: Any) -> Any:
        try:
            return model.model_validate(node)
        except ValidationError as exc:
            raise ProviderError(f"Unexpected {model.__name__} payload: {exc}") from exc

    @staticmethod
    def _require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
        value = data.get(key)
        if not isinstance(value, dict):
            raise ProviderError(f"Missing/invalid object at key '{key}'")
        return value

    @staticmethod
    def _require_list(data: dict[str, Any], key: str) -> list[Any]:
        value = data.get(key)
        if not isinstance(value, list):
            raise ProviderError(f"Missing/invalid list at key '{key}'")
        return value
