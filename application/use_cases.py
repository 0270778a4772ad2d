from typing import Any, List
from domain.entities import Task
from infrastructure.task_store import TaskStore

class TaskUseCases:
    def __init__(self, store: TaskStore):
        self.store = store

    def create_task(self, title: Any = None) -> Task:
        task = Task(title=title, completed=False)
        return self.store.create_task(task)

    def get_all_tasks(self) -> List[Task]:
        return self.store.get_all_tasks()
