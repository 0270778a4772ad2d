from dataclasses import dataclass
from typing import Any, Optional

@dataclass
class Task:
    title: Any = None
    completed: bool = False
    id: Optional[int] = None
