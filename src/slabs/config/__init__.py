"""Configuration system for slabs."""

from .factory import ComponentFactory
from .models import ChunkingConfig, ComponentConfig
from .settings import Settings, load_settings, settings

__all__ = [
    "ChunkingConfig",
    "ComponentConfig",
    "ComponentFactory",
    "Settings",
    "load_settings",
    "settings",
]
