"""Container assembly for the running API."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from natter.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with the real GitHub client and SQL store.

    Nothing connects at build time: the engine is created on first use, and
    an unset DATABASE__URL yields a store that reports itself unavailable.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app; routes resolve use cases from it.

    Tests call this a second time with a mock container, which replaces the
    one installed by create_app.
    """
    setup_dishka(container, app)
