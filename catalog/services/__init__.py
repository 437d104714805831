from catalog.services.api_client import APIClient
from catalog.services.exercise_service import ExerciseTemplateService

__all__ = ["APIClient", "ExerciseTemplateService"]
