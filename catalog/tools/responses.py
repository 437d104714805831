"""MCP-style tool payloads and the error-wrapping decorator shared by all handlers."""

import functools
import json
from typing import Any, Awaitable, Callable, ParamSpec

from loguru import logger
from pydantic import ValidationError

from catalog.exceptions import CatalogError

P = ParamSpec("P")

ToolResponse = dict[str, Any]


def _text_content(text: str) -> list[dict[str, str]]:
    return [{"type": "text", "text": text}]


def create_json_response(data: Any, *, indent: int = 2) -> ToolResponse:
    return {"content": _text_content(json.dumps(data, indent=indent, default=str))}


def create_empty_response(message: str = "No data found") -> ToolResponse:
    return {"content": _text_content(message)}


def create_error_response(message: str) -> ToolResponse:
    return {"content": _text_content(message), "isError": True}


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "request"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def with_error_handling(
    name: str,
) -> Callable[[Callable[P, Awaitable[ToolResponse]]], Callable[P, Awaitable[ToolResponse]]]:
    def decorator(func: Callable[P, Awaitable[ToolResponse]]) -> Callable[P, Awaitable[ToolResponse]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> ToolResponse:
            try:
                return await func(*args, **kwargs)
            except ValidationError as exc:
                logger.warning(f"[{name}] invalid request: {exc}")
                return create_error_response(f"Error in {name}: invalid request ({_describe_validation_error(exc)})")
            except CatalogError as exc:
                logger.error(f"[{name}] {exc}")
                return create_error_response(f"Error in {name}: {exc}")
            except Exception as exc:  # noqa: BLE001
                logger.exception(f"[{name}] unexpected error: {exc}")
                return create_error_response(f"Error in {name}: {exc}")

        return wrapper

    return decorator
