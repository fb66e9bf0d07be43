"""
Progress percentage calculation.
"""
import math

from autocare.schemas.task import ServiceTask, TaskStatus


def compute_progress(tasks: list[ServiceTask]) -> int:
    """
    Completion percentage for a task list.

    Completed tasks count fully and in-progress tasks count 30%. The result
    is rounded half up and is not clamped to 100.
    """
    total = len(tasks)
    if total == 0:
        return 0
    completed = sum(1 for t in tasks if t.status == TaskStatus.COMPLETED)
    in_progress = sum(1 for t in tasks if t.status == TaskStatus.IN_PROGRESS)
    return math.floor((100 * completed + 30 * in_progress) / total + 0.5)
