import logging
from threading import Lock
from typing import Callable, Optional

from . import settings
from .exceptions import MetadataFetchError
from .sources import INSTANCE_TYPE_SOURCES
from .sources.host import get_architecture, is_graviton_architecture

logger = logging.getLogger("providers")


class InstanceMetadataProvider:
    """
    Supplies host metadata to the page rendering layer.

    The instance type is fetched at most once per provider (per process when the application builds one provider at start-up).
    Concurrent first callers wait on the in-flight fetch and share its result.
    Failed fetches are never cached.
    """

    def __init__(
        self,
        instance_type_source: Callable[[], str],
        architecture_source: Callable[[], Optional[str]] = get_architecture,
        cache_instance_type: bool = True,
        fallback_instance_type: Optional[str] = None,
    ):
        self.instance_type_source = instance_type_source
        self.architecture_source = architecture_source
        self.cache_instance_type = cache_instance_type
        self.fallback_instance_type = fallback_instance_type
        self._instance_type = None
        self._lock = Lock()

    def _handle_fetch_error(self, error: MetadataFetchError) -> str:
        if self.fallback_instance_type is None:
            logger.error(f"instance type lookup failed: {error}")
            raise error
        logger.warning(f"instance type lookup failed, using fallback({self.fallback_instance_type}): {error}")
        return self.fallback_instance_type

    def get_instance_type(self) -> str:
        """Return the instance type, fetching it from the configured source on first use"""
        if not self.cache_instance_type:
            try:
                return self.instance_type_source()
            except MetadataFetchError as e:
                return self._handle_fetch_error(e)

        if self._instance_type is not None:
            return self._instance_type

        with self._lock:
            if self._instance_type is None:
                try:
                    instance_type = self.instance_type_source()
                except MetadataFetchError as e:
                    # fallback is returned but not cached, the next call retries
                    return self._handle_fetch_error(e)
                logger.info(f"instance_type: {instance_type}")
                self._instance_type = instance_type
        return self._instance_type

    def get_architecture(self) -> str:
        return self.architecture_source() or ""

    def is_graviton_instance(self) -> bool:
        return is_graviton_architecture(self.architecture_source())


def create_provider(
    source_name: str = settings.INSTANCE_TYPE_SOURCE, fallback_instance_type: Optional[str] = settings.INSTANCE_TYPE_FALLBACK
) -> InstanceMetadataProvider:
    """Build the provider for the named instance type source ('metadata', 'environment' or 'architecture')"""
    if source_name not in INSTANCE_TYPE_SOURCES:
        raise ValueError(f"{source_name} not in: {INSTANCE_TYPE_SOURCES.keys()}")
    source, cacheable = INSTANCE_TYPE_SOURCES[source_name]
    logger.info(f"Using instance type source: {source_name}")
    return InstanceMetadataProvider(instance_type_source=source, cache_instance_type=cacheable, fallback_instance_type=fallback_instance_type)
