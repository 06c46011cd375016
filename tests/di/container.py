"""Test container with per-component mocking."""

from collections.abc import Sequence

from dishka import AsyncContainer, Provider, make_async_container

from desk.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None,
    extra_providers: Sequence[Provider] = (),
) -> AsyncContainer:
    """Build a container where every mockable component is faked unless unmocked.

    Args:
        unmock: Components that use their production implementation
        extra_providers: Providers appended last; they override earlier ones

    Returns:
        Configured container

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        build_test_container()                         # all fakes
        build_test_container(unmock={"persistence"})   # real postgres
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, *extra_providers)


def _validate_unmock(unmock: set[Component]) -> None:
    known = {base.__mock_component__ for base in PROVIDERS if base.__mock_component__}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
