"""Builds chunkers and process-wide services from configuration."""

import sys

from loguru import logger

from slabs.chunker import BaseChunker, ChunkerFactory, RecursiveCharacterChunker
from slabs.errors import SlabsError, is_configuration_error
from slabs.observability import init_tracer

from .models import ComponentConfig
from .settings import Settings, settings


class ComponentFactory:
    """Entry point for applications that configure slabs from settings.

    Chunker construction is delegated to ``ChunkerFactory``; settings only
    fill in defaults the config left out.
    """

    @staticmethod
    def create_chunker(config: ComponentConfig, defaults: Settings | None = None) -> BaseChunker:
        """Create a chunker from configuration.

        A semantic chunker without an explicit ``threshold`` gets
        ``SEMANTIC_THRESHOLD`` from the settings.
        """
        defaults = defaults or settings
        params = dict(config.params)
        if config.type == "semantic":
            params.setdefault("threshold", defaults.SEMANTIC_THRESHOLD)

        logger.info(f"Creating chunker: {config.type}")
        try:
            return ChunkerFactory.create(config.type, **params)
        except SlabsError as e:
            if is_configuration_error(e):
                logger.error(f"Invalid parameters for chunker '{config.type}': {e.to_dict()}")
            raise

    @staticmethod
    def default_chunker(config: Settings | None = None) -> BaseChunker:
        """Create the default prose chunker from settings.

        The configured overlap is clamped below the chunk size.
        """
        config = config or settings
        overlap = min(config.CHUNK_OVERLAP, config.CHUNK_SIZE - 1)
        logger.info(
            f"Creating default recursive chunker "
            f"(size={config.CHUNK_SIZE}, overlap={overlap})"
        )
        return RecursiveCharacterChunker.prose(config.CHUNK_SIZE, overlap)

    @staticmethod
    def configure_logging(config: Settings | None = None) -> int:
        """Replace loguru's sinks with one stderr sink at ``LOG_LEVEL``.

        Returns:
            The loguru handler id of the new sink
        """
        config = config or settings
        logger.remove()
        return logger.add(sys.stderr, level=config.LOG_LEVEL.upper())

    @staticmethod
    def init_tracing(config: Settings | None = None) -> bool:
        """Initialize tracing when the settings enable it.

        Returns:
            True if a tracer was installed
        """
        config = config or settings
        if not config.TRACING_ENABLED:
            return False
        return init_tracer(service_name="slabs")
