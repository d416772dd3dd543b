"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from learnhub.entities import SummaryKind


class SummarizeRequest(BaseModel):
    """Request DTO for a standard summary.

    The handler will convert this to internal calls to the service layer.
    """

    text: str = Field(..., description="The text to summarize", min_length=1)
    max_length: int | None = Field(
        None,
        description="Length budget for the summary (defaults to server setting)",
        ge=1,
        le=5000,
    )


class TextRequest(BaseModel):
    """Request DTO for bullet points and key concepts."""

    text: str = Field(..., description="The text to process", min_length=1)


class StudyQuestionsRequest(BaseModel):
    """Request DTO for study question generation."""

    text: str = Field(..., description="The text to generate questions from", min_length=1)
    count: int = Field(5, description="Number of questions wanted", ge=1, le=20)


class BatchNoteItem(BaseModel):
    """One note in a batch request."""

    id: str = Field(..., description="Note identifier", min_length=1)
    content: str = Field(..., description="Note content")


class BatchSummarizeRequest(BaseModel):
    """Request DTO for batch summarization."""

    notes: list[BatchNoteItem] = Field(..., description="Notes to summarize", min_length=1)
    type: SummaryKind = Field(SummaryKind.STANDARD, description="Summary kind for every note")
    max_length: int | None = Field(None, description="Length budget for standard summaries", ge=1)


class CreateCourseRequest(BaseModel):
    """Request DTO for creating a course."""

    title: str = Field(..., min_length=1)
    description: str = Field("", description="Optional course description")


class CreateNoteRequest(BaseModel):
    """Request DTO for creating a note."""

    course_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class GenerateSummaryRequest(BaseModel):
    """Request DTO for summarizing a stored note."""

    type: SummaryKind = Field(SummaryKind.STANDARD, description="Summary kind")
    max_length: int | None = Field(None, ge=1)
