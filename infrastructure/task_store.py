import threading
from typing import List
from domain.entities import Task

class TaskStore:
    """In-memory task storage. Lives as long as the process; nothing is persisted."""

    def __init__(self):
        self._tasks: List[Task] = []
        # id is derived from the current count, so read-count and append must not interleave
        self._lock = threading.Lock()

    def create_task(self, task: Task) -> Task:
        with self._lock:
            task.id = len(self._tasks) + 1
            self._tasks.append(task)
            return task

    def get_all_tasks(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)
