"""Dependency injection container.

Explicit registration and resolution, no framework. The container is
always constructed by the caller; there is no process-wide default
instance, so each container owns its own graph.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(PathwayAnalysisService)

        # Testing
        container = Container()
        container.register(DrugLookupPort, lambda: FakeLookup())
        lookup = container.resolve(DrugLookupPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default bindings.

        The graph is a singleton loaded from the interaction repository
        on first resolve, and shared by the analysis service.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.cache import InMemoryCache
        from .adapters.graph import CSVDrugLookup, CSVInteractionRepository
        from .graph.digraph import DirectedGraph
        from .ports.cache import CachePort
        from .ports.graph import DrugLookupPort, InteractionRepositoryPort
        from .services import PathwayAnalysisService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            CachePort,
            lambda: InMemoryCache(
                name="analysis", max_size=config.analysis.cache_max_entries
            ),
        )
        container.register(
            InteractionRepositoryPort,
            lambda: CSVInteractionRepository(config.graph),
        )
        container.register(DrugLookupPort, lambda: CSVDrugLookup(config.graph))
        container.register(
            DirectedGraph,
            lambda: container.resolve(InteractionRepositoryPort).load(),
        )

        def create_analysis_service() -> PathwayAnalysisService:
            return PathwayAnalysisService(
                graph=container.resolve(DirectedGraph),
                drug_lookup=container.resolve(DrugLookupPort),
                cache=container.resolve(CachePort),
                config=config.analysis,
            )

        container.register(PathwayAnalysisService, create_analysis_service)

        return container
