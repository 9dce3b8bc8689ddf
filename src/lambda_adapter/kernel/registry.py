"""
Dependency registry used to build controllers and the services they need.

Classes are registered either with an explicit factory or bare, in which case
``resolve`` constructs them by resolving each annotated ``__init__`` parameter
through the same registry.
"""

import inspect
from typing import Any, Callable, Dict, Optional, Type, TypeVar, get_type_hints

from lambda_adapter.errors.application import DependencyNotRegisteredError
from lambda_adapter.utils.observability import logger

T = TypeVar('T')


class Registry:
    """Maps types to the callables that build them."""

    _instance: Optional['Registry'] = None

    def __init__(self):
        self._providers: Dict[type, Optional[Callable[[], Any]]] = {}

    @classmethod
    def get_instance(cls) -> 'Registry':
        """Get or create the process-wide registry instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, impl: type, factory: Optional[Callable[[], Any]] = None) -> None:
        """Register ``impl``, optionally with a factory that builds it."""
        if impl in self._providers:
            logger.debug("Overriding registered dependency", extra={"dependency": impl.__name__})
        self._providers[impl] = factory

    def is_registered(self, impl: type) -> bool:
        return impl in self._providers

    def resolve(self, impl: Type[T]) -> T:
        """
        Build an instance of ``impl``.

        Raises:
            DependencyNotRegisteredError: if ``impl`` or one of its dependencies is unknown
        """
        if impl not in self._providers:
            raise DependencyNotRegisteredError(impl)

        factory = self._providers[impl]
        if factory is not None:
            return factory()

        return impl(**self._resolve_dependencies(impl))

    def _resolve_dependencies(self, impl: type) -> Dict[str, Any]:
        init = impl.__init__
        if init is object.__init__:
            return {}

        hints = get_type_hints(init)
        dependencies: Dict[str, Any] = {}
        for name, parameter in inspect.signature(init).parameters.items():
            if name == 'self' or parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            dependency = hints.get(name)
            if dependency is None or not self.is_registered(dependency):
                if parameter.default is not parameter.empty:
                    continue
                raise DependencyNotRegisteredError(dependency if isinstance(dependency, type) else impl)
            dependencies[name] = self.resolve(dependency)
        return dependencies


def injectable(impl: Type[T]) -> Type[T]:
    """Class decorator registering ``impl`` in the process-wide registry."""
    Registry.get_instance().register(impl)
    return impl
