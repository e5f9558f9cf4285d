"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from board.util.di import PROVIDERS, Component, get_provider

# Importing the mocks registers them as subclasses of the component bases
from tests.di.persistence import MockPersistenceProvider  # noqa: F401
from tests.di.storage import MockStorageProvider  # noqa: F401


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container, usable both directly and behind the
        FastAPI app

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, in-memory images
        container = build_test_container(unmock={"persistence"})

        # Real filesystem storage under STORAGE__UPLOAD_DIR
        container = build_test_container(unmock={"storage"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        if not base.is_mockable():
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)
        else:
            use_mock = base.__mock_component__ not in unmock
            provider_class = get_provider(base, use_mock=use_mock)

        # All providers instantiated without arguments (Settings comes from DI)
        provider_instances.append(provider_class())

    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are named
    """
    all_components = {
        base.__mock_component__ for base in PROVIDERS if base.is_mockable()
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
