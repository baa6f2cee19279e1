"""
Application default settings and the default-value resolver.

DefaultStore wraps the host application's settings (a name-keyed mapping of
typed default values) and resolves a parameter's initial value from them.
A process-wide shared store is available through get_shared_default_store(),
which creates it once under a lock.
"""

import logging
import threading
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from paramstate.errors import DefaultTypeMismatch

logger = logging.getLogger(__name__)


class DefaultStore:
    """Read-only view of the application's default settings.

    Values are returned as stored; resolve() additionally checks them
    against the representation parameters expect (str).
    """

    def __init__(self, settings: Optional[Mapping[str, Any]] = None, expected_type: type = str):
        """
        Args:
            settings: Setting name to default value
            expected_type: Type every resolved default must have
        """
        self._settings: Dict[str, Any] = dict(settings) if settings else {}
        self.expected_type = expected_type

    def __len__(self) -> int:
        return len(self._settings)

    def __contains__(self, name: str) -> bool:
        return name in self._settings

    def __iter__(self) -> Iterator[str]:
        return iter(self._settings)

    def settings(self) -> List[Tuple[str, Any]]:
        """Enumerate all settings as (name, value) pairs in definition order."""
        return list(self._settings.items())

    def get_setting(self, name: str) -> Optional[Any]:
        """Get a stored default by name.

        Returns:
            The stored value, or None if no setting has that name

        Raises:
            ValueError: name is empty
        """
        if not name:
            raise ValueError("Setting name must be a non-empty string")
        return self._settings.get(name)

    def resolve(self, name: str) -> Optional[str]:
        """Resolve the default value for a parameter.

        Args:
            name: Parameter internal name

        Returns:
            The stored default, or None when the store has no such setting

        Raises:
            DefaultTypeMismatch: stored default is not of expected_type
        """
        stored = self.get_setting(name)
        if stored is None:
            return None
        if not isinstance(stored, self.expected_type):
            raise DefaultTypeMismatch(name, type(stored), self.expected_type, stored)
        logger.debug(f"Default setting found: {name}={stored!r}")
        return stored


# Process-wide shared store
_shared_default_store: Optional[DefaultStore] = None
_shared_store_lock = threading.Lock()


def get_shared_default_store(settings: Optional[Mapping[str, Any]] = None) -> DefaultStore:
    """Get the process-wide DefaultStore, creating it on first call.

    Only the first caller's settings are used; later calls return the
    existing store and ignore their argument.

    Raises:
        ValueError: first call without settings
    """
    global _shared_default_store
    with _shared_store_lock:
        if _shared_default_store is None:
            if settings is None:
                raise ValueError("The first request for the shared default store must supply settings")
            _shared_default_store = DefaultStore(settings)
            logger.info(f"Created shared default store with {len(_shared_default_store)} setting(s)")
        return _shared_default_store


def reset_shared_default_store() -> None:
    """Drop the shared store. For testing only."""
    global _shared_default_store
    with _shared_store_lock:
        _shared_default_store = None
