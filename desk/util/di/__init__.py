"""Dependency injection wiring for desk."""

from typing import Type

from desk.util.di.application import ProdApplicationProvider
from desk.util.di.base import Component, ProviderBase
from desk.util.di.core import ProdConfigProvider
from desk.util.di.domain import ProdDomainProvider
from desk.util.di.infrastructure import (
    MailProvider,
    OpenIMProvider,
    PersistenceProvider,
    ProdMailProvider,
    ProdOpenIMProvider,
    ProdPersistenceProvider,
)

# Core providers are used as-is; infrastructure bases resolve to a variant
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    OpenIMProvider,
    MailProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve an entry of ``PROVIDERS`` to the class to instantiate.

    A base without subclasses is returned unchanged. Otherwise the subclass
    whose ``__is_mock__`` equals ``use_mock`` is picked; mock variants only
    exist once ``tests.di`` has been imported.

    Raises:
        ValueError: If the requested variant is not registered
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if getattr(variant, "__is_mock__", False) == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "MailProvider",
    "OpenIMProvider",
    "PersistenceProvider",
    "ProdMailProvider",
    "ProdOpenIMProvider",
    "ProdPersistenceProvider",
]
