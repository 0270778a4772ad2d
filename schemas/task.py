from typing import Any
from pydantic import BaseModel

class TaskCreate(BaseModel):
    # title is taken as-is; a missing one is stored as None
    title: Any = None

class TaskResponse(BaseModel):
    id: int
    title: Any = None
    completed: bool = False
