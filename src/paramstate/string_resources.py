"""
String-resource lookup used to resolve localized display names.
"""

import json
import logging
from importlib import resources
from typing import Dict, Mapping, Optional

from paramstate.config import DEFAULT_DESCRIPTOR_PACKAGE, DEFAULT_DISPLAY_NAMES_RESOURCE

logger = logging.getLogger(__name__)


class StringResources:
    """Name-keyed string table, callable as a lookup.

    Example:
        strings = StringResources({"PARAM_DISPLAY_NAME_LogDir": "Log directory"})
        strings("PARAM_DISPLAY_NAME_LogDir")   # 'Log directory'
        strings("missing")                     # None
    """

    def __init__(self, strings: Optional[Mapping[str, str]] = None):
        self._strings: Dict[str, str] = dict(strings) if strings else {}

    def __call__(self, resource_name: str) -> Optional[str]:
        return self.get(resource_name)

    def __len__(self) -> int:
        return len(self._strings)

    def get(self, resource_name: str) -> Optional[str]:
        """Get a string by name, or None if the table has no such entry.

        Raises:
            ValueError: resource_name is empty
        """
        if not resource_name:
            raise ValueError("String resource name must be a non-empty string")
        return self._strings.get(resource_name)

    @classmethod
    def from_package(cls, package: str, resource: str) -> 'StringResources':
        """Load a JSON object of name -> string shipped inside a package."""
        text = resources.files(package).joinpath(resource).read_text(encoding="utf-8")
        strings = json.loads(text)
        logger.debug(f"Loaded {len(strings)} string resource(s) from {package}/{resource}")
        return cls(strings)

    @classmethod
    def packaged_display_names(cls) -> 'StringResources':
        """Load the display names shipped with the packaged descriptor table."""
        return cls.from_package(DEFAULT_DESCRIPTOR_PACKAGE, DEFAULT_DISPLAY_NAMES_RESOURCE)
