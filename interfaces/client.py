"""HTTP client for the task API and the view state behind the task page.

``TaskListView`` follows the same rules as the browser page served at ``/``:
load on display, skip blank submissions, clear the input and reload after a
successful append, and only log failures.
"""
from typing import Any, Dict, List, Optional
import httpx
import logging

logger = logging.getLogger(__name__)

class TaskApiClient:
    def __init__(self, base_url: str, http: Optional[httpx.Client] = None, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        # only a client created here is closed by close()
        self._owns_http = http is None
        self.http = http if http is not None else httpx.Client(timeout=timeout)

    @property
    def tasks_url(self) -> str:
        return f"{self.base_url}/api/tasks"

    def list_tasks(self) -> List[Dict[str, Any]]:
        response = self.http.get(self.tasks_url)
        response.raise_for_status()
        return response.json()

    def add_task(self, title: Any) -> Dict[str, Any]:
        response = self.http.post(self.tasks_url, json={"title": title})
        response.raise_for_status()
        return response.json()

    def close(self):
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc_info):
        self.close()


class TaskListView:
    def __init__(self, client: TaskApiClient):
        self.client = client
        self.tasks: List[Dict[str, Any]] = []
        self.new_task: str = ""

    def load(self) -> None:
        try:
            self.tasks = self.client.list_tasks()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching tasks: {e}")

    def submit(self) -> bool:
        if not self.new_task.strip():
            return False
        try:
            self.client.add_task(self.new_task)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error adding task: {e}")
            return False
        self.new_task = ""
        self.load()
        return True
