from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.app_settings import settings


class SearchExercisesRequest(BaseModel):
    query: Annotated[str, Field(min_length=1, description="Search query for exercise name")]
    muscle_group: Annotated[str | None, Field(default=None, description="Filter by specific muscle group")]
    exercise_type: Annotated[str | None, Field(default=None, description="Filter by exercise type")]
    limit: Annotated[
        int,
        Field(default=settings.SEARCH_DEFAULT_LIMIT, ge=1, le=100, description="Maximum number of results to return"),
    ]
    model_config = ConfigDict(extra="forbid")

    @field_validator("muscle_group", "exercise_type", mode="before")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ExerciseTemplatesRequest(BaseModel):
    page: Annotated[int, Field(default=1, ge=1)]
    page_size: Annotated[int, Field(default=5, ge=1, le=100)]
    model_config = ConfigDict(extra="forbid")


class ExerciseTemplateRequest(BaseModel):
    exercise_template_id: Annotated[str, Field(min_length=1)]
    model_config = ConfigDict(extra="forbid")
