"""
Image relevance matching.

Task titles and image titles are typed independently by staff, so an image
is attached to a task by a layered heuristic rather than a title lookup.
Each image is judged on its own; the result keeps the pool's order.
"""
import re
from typing import Optional, Sequence, Union

from autocare.schemas.image import ALL_CUSTOMERS, ImageCategory, SharedImage, TaskImage
from autocare.schemas.task import ServiceTask

Image = Union[TaskImage, SharedImage]

_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: Optional[str]) -> str:
    """Lowercase, trim and collapse inner whitespace."""
    if not title:
        return ""
    return _WHITESPACE.sub(" ", title).strip().lower()


def is_visible(image: SharedImage, viewer_customer_id: Optional[str]) -> bool:
    return image.customer_id == ALL_CUSTOMERS or image.customer_id == viewer_customer_id


def _has_word(text: str, word: str) -> bool:
    return re.search(r"(?<!\w)" + re.escape(word) + r"(?!\w)", text) is not None


def _title_matches(task_title: str, image_title: str) -> bool:
    if not task_title or not image_title:
        return False
    if task_title == image_title:
        return True
    return any(len(word) > 2 and _has_word(image_title, word) for word in task_title.split(" "))


def _fallback_matches(task_title: str, image_title: str, category: str) -> bool:
    if ("oil" in task_title or "filter" in task_title) \
            and category == ImageCategory.SERVICE.value and "oil" in image_title:
        return True
    if "ac" in task_title and "ac" in image_title:
        return True
    if "inspection" in task_title and category == ImageCategory.INSPECTION.value:
        return True
    if ("gear" in task_title or "transmission" in task_title) \
            and ("gear" in image_title or "transmission" in image_title):
        return True
    return False


def is_relevant(task: ServiceTask, image: Image) -> bool:
    """Whether `image` belongs with `task` by title or category rules."""
    task_title = normalize_title(task.title)
    image_title = normalize_title(image.title)
    category = (image.category or "").lower()
    return _title_matches(task_title, image_title) or _fallback_matches(task_title, image_title, category)


def relevant_images(
    task: ServiceTask,
    shared_images: Sequence[SharedImage],
    viewer_customer_id: Optional[str],
) -> list[Image]:
    """
    Images to show next to `task` for the given viewer.

    Images attached to the task itself win outright. Otherwise every shared
    image visible to the viewer is kept if it matches the task.
    """
    if task.images:
        return list(task.images)
    return [
        image for image in shared_images
        if is_visible(image, viewer_customer_id) and is_relevant(task, image)
    ]
