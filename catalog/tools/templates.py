from loguru import logger

from catalog.cache.exercise_cache import ExerciseCache
from catalog.search.engine import SearchEngine
from catalog.services.exercise_service import ExerciseTemplateService
from catalog.tools.formatters import format_exercise_template
from catalog.tools.responses import ToolResponse, create_empty_response, create_json_response, with_error_handling
from catalog.tools.schemas import ExerciseTemplateRequest, ExerciseTemplatesRequest, SearchExercisesRequest

MS_PER_HOUR = 1000 * 60 * 60


def _age_hours(age_ms: int) -> int:
    # half-hours round up
    return int(age_ms / MS_PER_HOUR + 0.5)


class ExerciseTemplateTools:
    """Handlers behind the search-exercises, get-exercise-templates and get-exercise-template tools."""

    def __init__(self, service: ExerciseTemplateService, cache: ExerciseCache, search_engine: SearchEngine) -> None:
        self.service = service
        self.cache = cache
        self.search_engine = search_engine

    async def ensure_cache_initialized(self) -> None:
        if not self.cache.is_ready:
            logger.info("Initializing exercise cache for template tools")
        await self.cache.initialize(self.service.get_exercise_templates)

    @with_error_handling("search-exercises")
    async def search_exercises(
        self,
        query: str,
        muscle_group: str | None = None,
        exercise_type: str | None = None,
        limit: int | None = None,
    ) -> ToolResponse:
        payload = {"query": query, "muscle_group": muscle_group, "exercise_type": exercise_type}
        if limit is not None:
            payload["limit"] = limit
        request = SearchExercisesRequest.model_validate(payload)

        await self.ensure_cache_initialized()
        results = self.search_engine.search(
            request.query,
            muscle_group=request.muscle_group,
            exercise_type=request.exercise_type,
        )
        limited = results[: request.limit]

        if not limited:
            return create_empty_response(f'No exercises found matching query: "{request.query}"')

        stats = self.cache.get_stats()
        return create_json_response(
            {
                "results": [format_exercise_template(exercise) for exercise in limited],
                "metadata": {
                    "total_results": len(results),
                    "displayed_results": len(limited),
                    "query": request.query,
                    "filters": {
                        "muscle_group": request.muscle_group,
                        "exercise_type": request.exercise_type,
                    },
                    "cache_stats": {
                        "total_exercises": stats.count,
                        "last_updated": stats.last_refreshed.isoformat() if stats.last_refreshed else None,
                        "cache_age_hours": _age_hours(stats.age_ms),
                    },
                },
            }
        )

    @with_error_handling("get-exercise-templates")
    async def get_exercise_templates(self, page: int = 1, page_size: int = 5) -> ToolResponse:
        request = ExerciseTemplatesRequest(page=page, page_size=page_size)
        data = await self.service.get_exercise_templates(request.page, request.page_size)
        templates = [format_exercise_template(template) for template in data.exercise_templates]

        if not templates:
            return create_empty_response("No exercise templates found for the specified parameters")

        return create_json_response(templates)

    @with_error_handling("get-exercise-template")
    async def get_exercise_template(self, exercise_template_id: str) -> ToolResponse:
        request = ExerciseTemplateRequest(exercise_template_id=exercise_template_id)
        template = await self.service.get_exercise_template(request.exercise_template_id)

        if template is None:
            return create_empty_response(f"Exercise template with ID {request.exercise_template_id} not found")

        return create_json_response(format_exercise_template(template))
