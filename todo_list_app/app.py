import logging

import streamlit as st

from todo_list_app.api import TodoApi
from todo_list_app.client import TodoClient
from todo_list_app.config import Settings
from todo_list_app.errors import BackendError, ConfigError
from todo_list_app.logging_setup import setup_logging

logger = logging.getLogger("todo_list_app.app")

TOAST_ICONS = {"success": "✅", "warning": "⚠️", "error": "❌"}

# --- Configuration ---
settings = Settings.from_env()
setup_logging(settings.log_level)

st.set_page_config(page_title="My To-Do", page_icon="📝", layout="centered")

try:
    backend_url = settings.require_backend_url()
except ConfigError as e:
    st.error(str(e))
    st.stop()


# --- Helper Functions ---
def notify(level, message):
    """Show a transient toast for a client notification."""
    st.toast(message, icon=TOAST_ICONS.get(level))


def build_client():
    api = TodoApi(backend_url, timeout=settings.request_timeout)
    return TodoClient(api, notify)


def clear_input():
    st.session_state.task_input = ""


def run_action(action, *args, **kwargs):
    """
    Run a client operation from a widget callback.

    The client already reports create/delete failures; what can still escape
    is a failed reload, which is shown as an error toast instead of a traceback.
    """
    try:
        action(*args, **kwargs)
    except BackendError as e:
        logger.exception("Reload after %s failed", action.__name__)
        notify("error", f"Could not refresh tasks: {e}")


def add_task():
    """Callback for the Add button."""
    client = st.session_state.todo_client
    run_action(client.add, st.session_state.task_input, clear_input=clear_input)


def delete_task(task_id):
    """Callback for a row's Delete button."""
    run_action(st.session_state.todo_client.remove, task_id)


def clear_all_tasks():
    run_action(st.session_state.todo_client.clear_all)


# --- Initialization ---
# One client per browser session; it keeps the task list across reruns
if "todo_client" not in st.session_state:
    st.session_state.todo_client = build_client()
if "tasks_loaded" not in st.session_state:
    st.session_state.tasks_loaded = False
if "task_input" not in st.session_state:
    st.session_state.task_input = ""

client = st.session_state.todo_client

# Fetch once per session; a failed fetch is retried on the next rerun
if not st.session_state.tasks_loaded:
    try:
        client.load()
        st.session_state.tasks_loaded = True
    except BackendError as e:
        logger.exception("Initial load from %s failed", backend_url)
        st.error(f"Could not load tasks from the backend: {e}")

# --- App Layout ---
st.title("My To-Do")

col1, col2 = st.columns([0.8, 0.2])
with col1:
    st.text_input(
        "New task",
        key="task_input",
        placeholder="What's on your mind?",
        label_visibility="collapsed",
    )
with col2:
    st.button("Add", key="add", on_click=add_task)

# --- Task Summary ---
col1, col2 = st.columns([0.8, 0.2])
with col1:
    st.write(f"You have {client.count} {'task' if client.count == 1 else 'tasks'}")
with col2:
    if not client.is_empty:
        st.button("Clear All", key="clear_all", on_click=clear_all_tasks)

# --- Display Task List ---
if client.is_empty:
    st.info("No tasks yet. Add one!")
else:
    for i, task in enumerate(client.tasks):
        col1, col2 = st.columns([0.85, 0.15])
        with col1:
            st.text(task.text)
        with col2:
            st.button(
                "Delete",
                key=f"delete_{i}_{task.id}",
                on_click=delete_task,
                args=(task.id,),
                help="Delete this task",
            )
        st.divider()
