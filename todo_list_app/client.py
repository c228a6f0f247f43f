import logging
from dataclasses import dataclass

from .errors import BackendError
from .models import Task, prepend, temporary_id, without

logger = logging.getLogger(__name__)

# Toast messages shown to the user
EMPTY_TASK = "Task cannot be empty!"
TASK_ADDED = "Task Added"
ADD_FAILED = "Failed to add task"
TASK_DELETED = "Task Deleted"
DELETE_FAILED = "Failed to delete task"
ALL_CLEARED = "All tasks cleared!"


@dataclass(frozen=True)
class ClearResult:
    """Outcome of clear_all: ids the backend deleted and ids it refused."""

    deleted: tuple
    failed: tuple

    @property
    def ok(self):
        return not self.failed


class TodoClient:
    """
    Mirrors the backend task list into local state.

    Mutations are applied locally first (optimistic update) and then sent to
    the backend. A failed create is rolled back; a failed delete triggers a
    full reload so the list matches the backend again.

    Args:
        api: A TodoApi (or anything with list_tasks/create_task/delete_task)
        notify: Callable taking (level, message); level is "success",
            "warning" or "error"
    """

    def __init__(self, api, notify):
        self.api = api
        self.notify = notify
        self._tasks = ()

    @property
    def tasks(self):
        return self._tasks

    @property
    def count(self):
        return len(self._tasks)

    @property
    def is_empty(self):
        return not self._tasks

    def load(self):
        """
        Replace local state with the backend's list.

        A BackendError propagates to the caller and the previous list is kept.
        """
        tasks = self.api.list_tasks()
        self._tasks = tuple(tasks)
        logger.debug("Loaded %d tasks", len(self._tasks))
        return self._tasks

    def add(self, text, clear_input=None):
        """
        Add a task optimistically, then create it on the backend.

        Args:
            text: The task description, sent as entered
            clear_input: Optional callable that empties the input widget

        Returns:
            bool: True if the backend accepted the task

        Raises:
            BackendError: If the task was created but the reload failed; the
                success notice has already been sent and the placeholder stays
        """
        if not text or not text.strip():
            self.notify("warning", EMPTY_TASK)
            return False

        temp_id = temporary_id()
        self._tasks = prepend(self._tasks, Task(id=temp_id, text=text))
        if clear_input is not None:
            clear_input()

        try:
            self.api.create_task(text)
        except BackendError as e:
            logger.warning("Create failed, rolling back %s: %s", temp_id, e)
            self._tasks = without(self._tasks, temp_id)
            self.notify("error", ADD_FAILED)
            return False

        # The task exists on the backend from here on, even if the reload fails
        self.notify("success", TASK_ADDED)
        # Swap the placeholder for the backend's copy
        self.load()
        return True

    def remove(self, task_id):
        """
        Drop a task locally, then delete it on the backend.

        The request is sent even if the id is not in the local list.

        Returns:
            bool: True if the backend confirmed the deletion

        Raises:
            BackendError: If the deletion failed and so did the reload; the
                failure notice has already been sent
        """
        self._tasks = without(self._tasks, task_id)

        try:
            self.api.delete_task(task_id)
        except BackendError as e:
            logger.warning("Delete of %s failed, reloading: %s", task_id, e)
            self.notify("error", DELETE_FAILED)
            self.load()
            return False

        self.notify("success", TASK_DELETED)
        return True

    def clear_all(self):
        """
        Delete every task currently shown, one request at a time.

        The local list ends up empty whatever the backend answers; deletions
        the backend refused are counted and reported to the user.

        Returns:
            ClearResult
        """
        deleted, failed = [], []
        for task in self._tasks:
            try:
                self.api.delete_task(task.id)
            except BackendError as e:
                logger.warning("Clear: delete of %s failed: %s", task.id, e)
                failed.append(task.id)
            else:
                deleted.append(task.id)

        self._tasks = ()
        result = ClearResult(deleted=tuple(deleted), failed=tuple(failed))

        if result.ok:
            self.notify("success", ALL_CLEARED)
        else:
            self.notify(
                "warning",
                f"Cleared the list, but {len(failed)} of {len(failed) + len(deleted)} "
                f"tasks could not be deleted on the server",
            )
        return result
