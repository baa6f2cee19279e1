"""
Command-line override store.

Collects "Name=Value" arguments for a known set of parameter names, so the
registry can apply them on top of the application defaults:

    overrides = CommandLineOverrides(["workingdirectory=/tmp", "extra"], registry.names())
    overrides.lookup("WorkingDirectory")   # '/tmp'
    overrides.positional                   # ['extra']

Names match case-insensitively unless case_sensitive=True; valid names that
differ only by case therefore need case_sensitive=True. Arguments naming
unknown parameters are ignored; later occurrences of a name win.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)

NAME_VALUE_SEPARATOR = "="
OPTION_PREFIXES = ("--", "-", "/")


class CommandLineOverrides:
    """Name-keyed view of pre-parsed command-line arguments."""

    def __init__(self, args: Sequence[str], valid_names: Iterable[str], case_sensitive: bool = False):
        """
        Args:
            args: Process arguments, without the program name
            valid_names: Parameter names that may be overridden
            case_sensitive: Match names exactly instead of ignoring case

        Raises:
            ValueError: two valid names differ only by case and case_sensitive is False
        """
        self.case_sensitive = case_sensitive
        self._canonical: Dict[str, str] = {}
        for name in valid_names:
            key = self._key(name)
            if key in self._canonical and self._canonical[key] != name:
                raise ValueError(
                    f"Parameter names '{self._canonical[key]}' and '{name}' differ only by case; "
                    f"use case_sensitive=True"
                )
            self._canonical[key] = name
        self._values: Dict[str, str] = {}
        self.positional: List[str] = []
        self.ignored: List[str] = []

        for arg in args:
            self._parse_arg(arg)

    def _key(self, name: str) -> str:
        return name if self.case_sensitive else name.casefold()

    def _parse_arg(self, arg: str) -> None:
        if NAME_VALUE_SEPARATOR not in arg:
            self.positional.append(arg)
            return

        raw_name, value = arg.split(NAME_VALUE_SEPARATOR, 1)
        for prefix in OPTION_PREFIXES:
            if raw_name.startswith(prefix):
                raw_name = raw_name[len(prefix):]
                break

        canonical = self._canonical.get(self._key(raw_name))
        if canonical is None:
            logger.debug(f"Ignoring argument for unknown parameter: {arg!r}")
            self.ignored.append(arg)
            return
        self._values[canonical] = value

    def __call__(self, name: str) -> Optional[str]:
        return self.lookup(name)

    def __len__(self) -> int:
        return len(self._values)

    def lookup(self, name: str) -> Optional[str]:
        """Get the argument value for a parameter, or None if none was given."""
        canonical = self._canonical.get(self._key(name))
        if canonical is None:
            return None
        return self._values.get(canonical)

    def as_dict(self) -> Dict[str, str]:
        """Supplied values keyed by canonical parameter name."""
        return dict(self._values)
