from __future__ import annotations

import logging
from typing import Any, List, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .schemas import Priority, Task, TaskList
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"


def task_path(task_id: str) -> str:
    """Path of one task; the opaque id is encoded as a single segment."""
    return f"{TASKS_PATH}/{quote(str(task_id), safe='')}"


class TaskAPIError(Exception):
    """
    Raised for any failed Task API call: transport error, non-2xx status,
    or a response body that does not match the wire shape.
    """

    def __init__(self, operation: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.status_code = status_code


# PUBLIC_INTERFACE
class TaskAPIClient:
    """
    Async client for the remote Task API.

    Owns its httpx.AsyncClient unless one is injected. Use as an async context
    manager or call aclose() when done.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)
            self._owns_http = True

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TaskAPIClient":
        settings = settings or get_settings()
        return cls(settings.backend_url, timeout=settings.request_timeout)

    async def __aenter__(self) -> "TaskAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _request(self, operation: str, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TaskAPIError(
                operation, f"HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TaskAPIError(operation, f"{e.__class__.__name__}: {e}") from e
        except (TypeError, ValueError) as e:
            # Request body could not be encoded as JSON.
            raise TaskAPIError(operation, f"unencodable request: {e}") from e
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    @staticmethod
    def _decode(operation: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise TaskAPIError(operation, "response body is not valid JSON", response.status_code) from e

    def _parse_task(self, operation: str, response: httpx.Response) -> Task:
        try:
            return Task.model_validate(self._decode(operation, response))
        except ValidationError as e:
            raise TaskAPIError(operation, f"malformed task: {e.error_count()} error(s)", response.status_code) from e

    async def list_tasks(self) -> List[Task]:
        """
        Fetch every task in server order. A body without `tasks` yields an empty list.
        """
        response = await self._request("list_tasks", "GET", TASKS_PATH)
        data = self._decode("list_tasks", response)
        if not isinstance(data, dict):
            raise TaskAPIError("list_tasks", "expected a JSON object", response.status_code)
        try:
            return TaskList.model_validate(data).tasks
        except ValidationError as e:
            raise TaskAPIError("list_tasks", f"malformed task list: {e.error_count()} error(s)", response.status_code) from e

    async def create_task(self, title: str, description: str = "", priority: Union[Priority, str] = Priority.COMMON) -> Task:
        """
        Create a task. Fields are sent as given; the server owns validation.
        """
        payload = {
            "title": title,
            "description": description,
            "priority": priority.value if isinstance(priority, Priority) else priority,
        }
        response = await self._request("create_task", "POST", TASKS_PATH, json=payload)
        return self._parse_task("create_task", response)

    async def update_task(self, task_id: str, *, completed: bool) -> Task:
        response = await self._request(
            "update_task", "PATCH", task_path(task_id), json={"completed": completed}
        )
        return self._parse_task("update_task", response)

    async def delete_task(self, task_id: str) -> None:
        # Body is unspecified by the protocol and ignored.
        await self._request("delete_task", "DELETE", task_path(task_id))
