"""Task store: ordered task list, id allocation, and task mutation.

Tasks live in insertion order in ``_tasks``; ``_index`` maps id -> Task for
constant-time lookup and is updated together with the list on every
insert and delete. Ids come from a counter that only moves forward, so a
deleted id is never handed out again.
"""
import logging
from dataclasses import replace
from typing import Dict, List, Optional, Tuple
from models import Task, clean_description

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._index: Dict[int, Task] = {}
        self._next_id: int = 1

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    @property
    def next_id(self) -> int:
        return self._next_id

    # -------------------- queries --------------------
    def list(self) -> Tuple[Task, ...]:
        """Snapshot of all tasks in insertion order."""
        return tuple(replace(t) for t in self._tasks)

    def find_by_id(self, task_id: int) -> Optional[Task]:
        task = self._index.get(task_id)
        return replace(task) if task is not None else None

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        try:
            return task_id in self._index
        except TypeError:  # unhashable operand
            return False

    # -------------------- task operations --------------------
    def create(self, description: str) -> Task:
        """Add a pending task and return a copy of it.

        Raises ValidationError for a blank description; the counter is
        not advanced in that case.
        """
        text = clean_description(description)
        task = Task(id=self._allocate_id(), description=text)
        self._tasks.append(task)
        self._index[task.id] = task
        logger.debug("created task id=%s", task.id)
        return replace(task)

    def update_description(self, task_id: int, new_description: str) -> bool:
        # validate before lookup: a blank description never mutates anything
        text = clean_description(new_description)
        task = self._index.get(task_id)
        if task is None:
            logger.info("update: task id=%s not found", task_id)
            return False
        task.description = text
        logger.debug("updated task id=%s", task_id)
        return True

    def toggle_status(self, task_id: int) -> bool:
        task = self._index.get(task_id)
        if task is None:
            logger.info("toggle: task id=%s not found", task_id)
            return False
        task.toggle()
        logger.debug("toggled task id=%s done=%s", task_id, task.done)
        return True

    def delete(self, task_id: int) -> bool:
        task = self._index.pop(task_id, None)
        if task is None:
            logger.info("delete: task id=%s not found", task_id)
            return False
        self._tasks.remove(task)
        logger.debug("deleted task id=%s", task_id)
        return True

    def __str__(self) -> str:
        done = sum(1 for t in self._tasks if t.done)
        return f'Pending: {len(self._tasks) - done} tasks, Done: {done} tasks'
