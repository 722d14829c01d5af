"""Provider base class and swappable components."""

from typing import AbstractSet, ClassVar, Literal, get_args

from dishka import Provider

from tavern.util.error import DependencyInjectionError

# Infrastructure with a production and an in-process implementation
Component = Literal["email", "persistence"]
COMPONENTS: frozenset[str] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    A swappable component is declared by a base provider that sets
    ``__mock_component__``. Its subclasses are the implementations, told
    apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def check_components(names: AbstractSet[str]) -> None:
    """Raise DependencyInjectionError for names that are not components."""
    unknown = set(names) - COMPONENTS
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")
