"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from realty.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables, so integration runs can
    point DATABASE__URL at a disposable database.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - in-memory stores
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        # Mockable components use their mock unless explicitly unmocked
        use_mock = base.is_mockable() and base.__mock_component__ not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*provider_instances)


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject components that have no mockable provider."""
    known = {
        p.__mock_component__
        for p in PROVIDERS
        if p.is_mockable() and p.__mock_component__
    }
    unknown = set(unmock) - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
