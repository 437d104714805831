from catalog.tools.templates import ExerciseTemplateTools

__all__ = ["ExerciseTemplateTools"]
