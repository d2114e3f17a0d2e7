"""Pydantic models for uploaded images and pipeline results."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        """Return the JSON-ready dict, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UploadedFile(BaseModel):
    """A single file attached to a report submission."""

    buffer: bytes
    filename: str | None = None
    content_type: str | None = None

    @property
    def size(self) -> int:
        """Return the buffer size in bytes."""
        return len(self.buffer)


class UploadResult(CamelModel):
    """Location of an asset in the remote store."""

    remote_url: str
    remote_id: str


class ClassificationScores(CamelModel):
    """Classifier confidence per category."""

    is_mangrove: float = Field(ge=0.0, le=1.0)
    has_deforestation: float = Field(ge=0.0, le=1.0)
    has_pollution: float = Field(ge=0.0, le=1.0)
    is_relevant: float = Field(ge=0.0, le=1.0)


class ValidationResult(CamelModel):
    """Validity decision and labels derived from classification scores."""

    is_valid: bool
    confidence: float
    labels: list[str] = []
    scores: ClassificationScores | None = None
    error: str | None = None


class ProcessedImageRecord(CamelModel):
    """Result of running one uploaded image through the pipeline."""

    url: str
    remote_id: str = Field(alias="publicId")
    ai_validated: bool = True
    ai_score: float
    validation: ValidationResult


class DuplicateCheckResult(CamelModel):
    """Outcome of comparing an image against existing reports."""

    is_duplicate: bool = False
    similarity_score: float = 0.0
    matched_report_id: str | None = None
