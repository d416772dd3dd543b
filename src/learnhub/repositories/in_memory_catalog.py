"""In-process course catalog.

Holds courses, notes and generated summaries in dictionaries. It stands in
for the relational store of a full deployment and gives the cached routes
something real to read from.
"""

import time
import uuid

from learnhub.entities import CourseEntity, NoteEntity, SummaryEntity


class InMemoryCatalogRepository:
    """Dictionary-backed storage for courses, notes and summaries."""

    def __init__(self) -> None:
        self._courses: dict[str, CourseEntity] = {}
        self._notes: dict[str, NoteEntity] = {}
        self._summaries: dict[str, list[SummaryEntity]] = {}

    @classmethod
    def create(cls) -> "InMemoryCatalogRepository":
        return cls()

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex

    # Courses

    def list_courses(self) -> list[CourseEntity]:
        return list(self._courses.values())

    def get_course(self, course_id: str) -> CourseEntity | None:
        return self._courses.get(course_id)

    def add_course(self, title: str, description: str = "") -> CourseEntity:
        course = CourseEntity(id=self._new_id(), title=title, description=description)
        self._courses[course.id] = course
        return course

    # Notes

    def list_notes(self) -> list[NoteEntity]:
        return list(self._notes.values())

    def list_notes_by_course(self, course_id: str) -> list[NoteEntity]:
        return [note for note in self._notes.values() if note.course_id == course_id]

    def get_note(self, note_id: str) -> NoteEntity | None:
        return self._notes.get(note_id)

    def add_note(self, course_id: str, title: str, content: str) -> NoteEntity:
        note = NoteEntity(id=self._new_id(), course_id=course_id, title=title, content=content)
        self._notes[note.id] = note
        return note

    # Summaries

    def add_summary(self, note_id: str, kind: str, content: str) -> SummaryEntity:
        summary = SummaryEntity(
            id=self._new_id(),
            note_id=note_id,
            kind=kind,
            content=content,
            created_at=time.time(),
        )
        self._summaries.setdefault(note_id, []).append(summary)
        return summary

    def latest_summary(self, note_id: str) -> SummaryEntity | None:
        """Most recently generated summary for a note."""
        summaries = self._summaries.get(note_id)
        return summaries[-1] if summaries else None
