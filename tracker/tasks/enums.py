"""
Task Tracker API - Task Enums

Status values are stored and transmitted as integers.
"""

from enum import Enum


class TaskStatus(int, Enum):
    """Task status values."""
    OPEN = 0
    IN_PROGRESS = 1
    DONE = 2
