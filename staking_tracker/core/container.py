# staking_tracker/core/container.py

from typing import Any, Callable, Dict, List, NamedTuple, Optional, Type, TypeVar
import inspect

from .logging import TrackerLogger, log_with_context, DEBUG, ERROR

T = TypeVar('T')


class Registration(NamedTuple):
    implementation: Optional[Type]
    factory: Optional[Callable[['TrackerContainer'], Any]]


class TrackerContainer:
    """
    Process-wide service container.

    Every registered service is a singleton. Classes are built by resolving
    annotated constructor parameters from the container (a parameter named
    `config` receives the TrackerConfig); factories receive the container.
    """

    def __init__(self, config):
        self._config = config
        self._registrations: Dict[Type, Registration] = {}
        self._instances: Dict[Type, Any] = {}
        self._resolving: List[Type] = []

        self._logger = TrackerLogger.get_logger('core.container')

    @property
    def config(self):
        return self._config

    def register_singleton(self, interface: Type[T], implementation: Type[T]) -> 'TrackerContainer':
        log_with_context(self._logger, DEBUG, "Registering service",
                        interface=interface.__name__,
                        implementation=implementation.__name__)
        self._registrations[interface] = Registration(implementation, None)
        return self

    def register_factory(self, interface: Type[T],
                         factory: Callable[['TrackerContainer'], T]) -> 'TrackerContainer':
        log_with_context(self._logger, DEBUG, "Registering service factory",
                        interface=interface.__name__,
                        factory=factory.__name__)
        self._registrations[interface] = Registration(None, factory)
        return self

    def register_instance(self, interface: Type[T], instance: T) -> 'TrackerContainer':
        """Register an already constructed service, replacing any earlier registration"""
        self._registrations[interface] = Registration(type(instance), None)
        self._instances[interface] = instance
        return self

    def get(self, service_type: Type[T]) -> T:
        if service_type in self._instances:
            return self._instances[service_type]

        registration = self._registrations.get(service_type)
        if registration is None:
            raise ValueError(f"Service {service_type.__name__} not registered")

        if service_type in self._resolving:
            chain = " -> ".join(t.__name__ for t in [*self._resolving, service_type])
            log_with_context(self._logger, ERROR, "Circular dependency detected", chain=chain)
            raise ValueError(f"Circular dependency detected: {chain}")

        self._resolving.append(service_type)
        try:
            if registration.factory is not None:
                instance = registration.factory(self)
            else:
                instance = self._build(registration.implementation)
        except Exception as e:
            log_with_context(self._logger, ERROR, "Failed to create service",
                            service=service_type.__name__,
                            error=f"{type(e).__name__}: {e}")
            raise
        finally:
            self._resolving.pop()

        self._instances[service_type] = instance
        log_with_context(self._logger, DEBUG, "Service created",
                        service=service_type.__name__)
        return instance

    def _build(self, implementation: Type):
        kwargs = {}
        for name, param in inspect.signature(implementation.__init__).parameters.items():
            if name == 'self':
                continue
            if param.annotation in self._registrations:
                kwargs[name] = self.get(param.annotation)
            elif name == 'config':
                kwargs[name] = self._config
        return implementation(**kwargs)

    def instances(self) -> Dict[Type, Any]:
        """Services created so far"""
        return dict(self._instances)
