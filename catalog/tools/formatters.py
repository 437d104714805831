from typing import Any

from catalog.schemas import ExerciseTemplate


def format_exercise_template(template: ExerciseTemplate) -> dict[str, Any]:
    return {
        "id": template.id,
        "title": template.title,
        "type": template.type,
        "primaryMuscleGroup": template.primary_muscle_group,
        "secondaryMuscleGroups": list(template.secondary_muscle_groups),
        "equipment": template.equipment,
        "isCustom": template.is_custom,
    }
