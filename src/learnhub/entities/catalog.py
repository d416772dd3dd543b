"""Course catalog entities (courses, notes, generated summaries)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CourseEntity:
    id: str
    title: str
    description: str = ""


@dataclass(frozen=True)
class NoteEntity:
    id: str
    course_id: str
    title: str
    content: str


@dataclass(frozen=True)
class SummaryEntity:
    """A generated summary attached to a note.

    Attributes:
        id: Summary identifier
        note_id: The summarized note
        kind: SummaryKind value used to produce it
        content: The summary text
        created_at: Unix timestamp of generation
    """

    id: str
    note_id: str
    kind: str
    content: str
    created_at: float
