import inspect
from typing import Any, AsyncIterator

import httpx
from dependency_injector import containers, providers

from catalog.cache.exercise_cache import ExerciseCache
from catalog.search.engine import SearchEngine
from catalog.search.synonyms import DEFAULT_SYNONYMS
from catalog.services.exercise_service import ExerciseTemplateService
from catalog.tools.templates import ExerciseTemplateTools
from config.app_settings import settings


def build_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.API_TIMEOUT,
        limits=httpx.Limits(
            max_connections=settings.API_MAX_CONNECTIONS,
            max_keepalive_connections=settings.API_MAX_KEEPALIVE_CONNECTIONS,
        ),
    )


async def close_http_client(client: httpx.AsyncClient) -> None:
    await client.aclose()


async def http_client_resource() -> AsyncIterator[httpx.AsyncClient]:
    client = build_http_client()
    try:
        yield client
    finally:
        await close_http_client(client)


class App(containers.DeclarativeContainer):
    http_client = providers.Resource(http_client_resource)

    exercise_service = providers.Factory(ExerciseTemplateService, client=http_client, settings=settings)

    synonyms = providers.Object(DEFAULT_SYNONYMS)

    exercise_cache = providers.Singleton(
        ExerciseCache,
        ttl=settings.EXERCISE_CACHE_TTL,
        page_size=settings.EXERCISE_CACHE_PAGE_SIZE,
        page_delay=settings.EXERCISE_CACHE_PAGE_DELAY,
    )
    search_engine = providers.Singleton(SearchEngine, cache=exercise_cache, synonyms=synonyms)

    template_tools = providers.Factory(
        ExerciseTemplateTools,
        service=exercise_service,
        cache=exercise_cache,
        search_engine=search_engine,
    )


_container: App | None = None


def create_container() -> App:
    return App()


def set_container(container: App) -> None:
    global _container
    _container = container


def get_container() -> App:
    if _container is None:
        raise RuntimeError("Container is not initialized")
    return _container


async def init_container(container: App) -> None:
    init_resources = container.init_resources()
    if inspect.isawaitable(init_resources):
        await init_resources


async def shutdown_container(container: App) -> None:
    shutdown_resources = container.shutdown_resources()
    if inspect.isawaitable(shutdown_resources):
        await shutdown_resources


async def resolve(provider: providers.Provider) -> Any:
    """Call ``provider`` and await the result when async resources make it awaitable."""
    obj = provider()
    if inspect.isawaitable(obj):
        obj = await obj
    return obj
