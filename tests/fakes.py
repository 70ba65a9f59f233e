# tests/fakes.py

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import unquote

import httpx

from quest_log.client import TaskAPIClient
from quest_log.controller import QuestLogController

BASE_URL = "http://quest.test"


def task_json(
    id: str,
    title: str = "Quest",
    description: str = "",
    priority: Optional[str] = "common",
    completed: bool = False,
) -> Dict[str, Any]:
    return {
        "id": id,
        "title": title,
        "description": description,
        "priority": priority,
        "completed": completed,
    }


class FakeTaskAPI:
    """
    Scripted Task API for httpx.MockTransport.

    - Captures every request for assertions
    - Serves a mutable task list; individual operations can be made to fail
    - An operation can be held until its gate is released, to reorder completions
    """

    def __init__(self, tasks: Optional[List[Dict[str, Any]]] = None) -> None:
        self.tasks: List[Dict[str, Any]] = list(tasks or [])
        self.requests: List[httpx.Request] = []
        self.failures: Dict[str, httpx.Response] = {}
        self.gates: Dict[str, asyncio.Event] = {}
        self.list_body: Optional[Callable[[], httpx.Response]] = None
        self._next_id = 100

    def fail(self, method: str, status_code: int = 500, body: Any = None) -> None:
        self.failures[method] = httpx.Response(status_code, json=body if body is not None else {"detail": "boom"})

    def hold(self, method: str) -> asyncio.Event:
        gate = asyncio.Event()
        self.gates[method] = gate
        return gate

    def calls(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        gate = self.gates.get(request.method)
        if gate is not None:
            await gate.wait()
        if request.method in self.failures:
            return self.failures[request.method]
        return self._route(request)

    def _route(self, request: httpx.Request) -> httpx.Response:
        # Raw path keeps percent-escapes, so one encoded id stays one segment.
        path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        if path == "/api/tasks" and request.method == "GET":
            if self.list_body is not None:
                return self.list_body()
            return httpx.Response(200, json={"tasks": list(self.tasks)})
        if path == "/api/tasks" and request.method == "POST":
            payload = json.loads(request.content)
            created = task_json(
                str(self._next_id),
                title=payload["title"],
                description=payload["description"],
                priority=payload["priority"],
            )
            self._next_id += 1
            self.tasks.insert(0, created)
            return httpx.Response(201, json=created)

        task_id = unquote(path.rsplit("/", 1)[-1])
        found = next((t for t in self.tasks if t["id"] == task_id), None)
        if found is None:
            return httpx.Response(404, json={"detail": "Task not found"})
        if request.method == "PATCH":
            found.update(json.loads(request.content))
            return httpx.Response(200, json=found)
        if request.method == "DELETE":
            self.tasks.remove(found)
            return httpx.Response(204)
        return httpx.Response(405)


def make_controller(api: Callable[[httpx.Request], Any]) -> QuestLogController:
    client = TaskAPIClient(BASE_URL, transport=httpx.MockTransport(api))
    return QuestLogController(client=client, owns_client=True)
