from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseTemplate(BaseModel):
    id: str | None = None
    title: str = ""
    type: str = ""
    primary_muscle_group: str = ""
    secondary_muscle_groups: list[str] = Field(default_factory=list)
    equipment: str | None = None
    is_custom: bool = False
    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("title", "type", "primary_muscle_group", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("secondary_muscle_groups", mode="before")
    @classmethod
    def _normalize_secondary(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class ExerciseTemplatePage(BaseModel):
    page: int | None = None
    page_count: int | None = None
    exercise_templates: list[ExerciseTemplate] = Field(default_factory=list)
    model_config = ConfigDict(extra="ignore")

    @field_validator("exercise_templates", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class CacheStats(BaseModel):
    count: int
    ready: bool
    last_refreshed: datetime | None = None
    age_ms: int = 0
