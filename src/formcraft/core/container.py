"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from .logging_config import configure_logging
from ..registry import TypeRegistry
from ..render import Renderer


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings (explicit override or environment)."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_type_registry(self) -> TypeRegistry:
        """Provide type registry singleton with built-in field types."""
        return TypeRegistry()

    @singleton
    @provider
    def provide_renderer(self, registry: TypeRegistry) -> Renderer:
        """Provide renderer bound to the registry."""
        return Renderer(registry)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector and set up logging from its settings."""
    injector = Injector([CoreModule(settings)])
    resolved = injector.get(Settings)
    configure_logging(resolved.log_level, resolved.json_logs)
    return injector
