from loguru import logger
from pydantic import ValidationError

from catalog.exceptions import CatalogError
from catalog.schemas import ExerciseTemplate, ExerciseTemplatePage
from catalog.services.api_client import APIClient


class ExerciseTemplateService(APIClient):
    async def get_exercise_templates(self, page: int = 1, page_size: int = 5) -> ExerciseTemplatePage:
        url = self._build_url("v1/exercise_templates")
        status, data = await self._api_request(
            "get",
            url,
            params={"page": page, "pageSize": page_size},
            allow_statuses={404},
        )

        if status == 404 or data is None:
            logger.info(f"No exercise templates on page={page} page_size={page_size}. HTTP={status}")
            return ExerciseTemplatePage(page=page, page_count=0)

        try:
            return ExerciseTemplatePage.model_validate(data)
        except ValidationError as exc:
            logger.error(f"Invalid exercise templates payload for page={page}: {exc}")
            raise CatalogError("Invalid exercise templates payload", code=502, details=str(exc)) from exc

    async def get_exercise_template(self, exercise_template_id: str) -> ExerciseTemplate | None:
        url = self._build_url(f"v1/exercise_templates/{exercise_template_id}")
        status, data = await self._api_request("get", url, allow_statuses={404})

        if status == 404 or not data:
            logger.info(f"Exercise template {exercise_template_id} not found. HTTP={status}")
            return None

        try:
            return ExerciseTemplate.model_validate(data)
        except ValidationError as exc:
            logger.error(f"Invalid exercise template payload for id={exercise_template_id}: {exc}")
            raise CatalogError("Invalid exercise template payload", code=502, details=str(exc)) from exc
