"""Streamlit to-do list backed by a remote REST service."""

from .client import ClearResult, TodoClient
from .models import Task

__all__ = ["ClearResult", "Task", "TodoClient"]
