import logging
from urllib.parse import quote

import requests

from .errors import BackendError
from .models import tasks_from_json

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class TodoApi:
    """
    Thin wrapper around the backend's REST endpoints.

    Every transport error and every non-2xx answer comes out as a
    BackendError, so callers only need to handle one exception type.

    Args:
        base_url: The backend collection URL, e.g. https://host/api/todos
        session: Optional requests.Session (one is created if omitted)
        timeout: Seconds to wait for each request
    """

    def __init__(self, base_url, session=None, timeout=DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def task_url(self, task_id):
        return f"{self.base_url}/{quote(str(task_id), safe='')}"

    def list_tasks(self):
        """
        Fetch every task from the backend.

        Returns:
            tuple: Task objects in the order the backend returned them
        """
        response = self._request("GET", self.base_url)
        try:
            payload = response.json()
        except ValueError as e:
            raise BackendError(f"Backend returned invalid JSON: {e}") from e
        return tasks_from_json(payload)

    def create_task(self, text):
        self._request("POST", self.base_url, json={"task": text})

    def delete_task(self, task_id):
        self._request("DELETE", self.task_url(task_id))

    def _request(self, method, url, **kwargs):
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise BackendError(f"{method} {url} failed: {e}") from e

        if not response.ok:
            raise BackendError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response
