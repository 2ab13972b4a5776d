"""Dependency injection container.

Wires the graph port and the path solver port to their implementations.
Each port maps to one binding: a factory plus, for shared bindings, the
instance built on first resolve. Registering a port again replaces its
binding and drops any instance built from the old one.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config
from .domain.errors import ConfigurationError


@dataclass
class _Binding:
    factory: Callable[[], Any]
    shared: bool
    instance: Any = None
    built: bool = False

    def get(self) -> Any:
        if not self.shared:
            return self.factory()
        if not self.built:
            self.instance = self.factory()
            self.built = True
        return self.instance

    def forget(self) -> None:
        self.instance = None
        self.built = False


@dataclass
class Container:
    """Port-to-implementation bindings.

    Usage:
        container = Container.create_default()
        graph = container.resolve(SearchableGraphPort)
        result = container.resolve(PathSolverPort).solve(graph, 1, 8)

        # Swapping a solver in tests
        container.register(PathSolverPort, DepthFirstPathSolver)

    Attributes:
        config: Package configuration the default bindings were built from
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``.

        Args:
            port_type: The Protocol (or any type) used as lookup key.
            factory: Zero-argument callable building an implementation.
            singleton: Share one instance across resolves when True; build
                a fresh one per resolve otherwise.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory=factory, shared=singleton)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an implementation of ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")
            return binding.get()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._bindings

    def clear_singletons(self) -> None:
        """Drop shared instances; the next resolve builds them again."""
        with self._lock:
            for binding in self._bindings.values():
                binding.forget()

    def clear_all(self) -> None:
        with self._lock:
            self._bindings.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the default bindings.

        Every resolve of SearchableGraphPort yields a new empty graph; the
        path solver is shared and chosen by ``graph.default_strategy``.

        Raises:
            ConfigurationError: If no solver exists for the configured
                strategy.
        """
        from .adapters.graph import SOLVERS
        from .graph import GraphIndex
        from .ports.graph import PathSolverPort, SearchableGraphPort

        config = config or get_config()
        strategy = config.graph.default_strategy
        solver_type = SOLVERS.get(strategy)
        if solver_type is None:
            raise ConfigurationError(
                f"No path solver for strategy {strategy!r}",
                setting_name="graph.default_strategy",
                expected_type=" | ".join(sorted(SOLVERS)),
            )

        container = cls(config=config)
        container.register(
            SearchableGraphPort,
            lambda: GraphIndex(dedupe_edges=config.graph.dedupe_edges),
            singleton=False,
        )
        container.register(PathSolverPort, solver_type)
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, building it on first use."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Discard the process-wide container so the next call rebuilds it."""
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
