# Importing every model registers its table on Base.metadata
from mindnote.backend.models.base import Base
from mindnote.backend.models.category import Category
from mindnote.backend.models.note import Note, note_tags
from mindnote.backend.models.tag import Tag
from mindnote.backend.models.task import Task, TaskPriority, TaskStatus, task_tags

__all__ = [
    "Base",
    "Category",
    "Note",
    "Tag",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "note_tags",
    "task_tags",
]
