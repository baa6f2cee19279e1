"""
Enumerations describing a parameter's lifecycle, origin and validation rule.
"""

import os
from enum import Enum

from paramstate.errors import UnsupportedValidationRule


class ParameterState(Enum):
    """Lifecycle of a parameter value."""
    UNINITIALIZED = "Uninitialized"  # no value yet
    INITIALIZED = "Initialized"  # value set, not yet validated
    VALIDATED = "Validated"  # value passed its validation rule


class ParameterSource(Enum):
    """Where a parameter's current value came from."""
    UNDEFINED = "Undefined"
    FROM_DEFAULT_STORE = "FromDefaultStore"
    FROM_OVERRIDE_STORE = "FromOverrideStore"


class ParameterValidationRule(Enum):
    """Filesystem predicate applied to a parameter value.

    Member values are the spellings used in the descriptor table's
    ParamType column.
    """
    UNDEFINED = "Undefined"
    MUST_BE_EXISTING_DIRECTORY = "MustBeExistingDirectory"
    MUST_BE_EXISTING_FILE = "MustBeExistingFile"
    MUST_NOT_EXIST_AS_FILE = "MustNotExistAsFile"

    @classmethod
    def from_table_value(cls, raw_value: str) -> 'ParameterValidationRule':
        """Exact, case-sensitive lookup by table spelling.

        Raises:
            ValueError: raw_value names no member
        """
        return cls(raw_value)

    def is_satisfied_by(self, value: str) -> bool:
        """Apply this rule to a path.

        Args:
            value: Path to check

        Returns:
            True if the path satisfies the rule

        Raises:
            UnsupportedValidationRule: for UNDEFINED, which has no predicate
        """
        match self:
            case ParameterValidationRule.MUST_BE_EXISTING_DIRECTORY:
                return os.path.isdir(value)
            case ParameterValidationRule.MUST_BE_EXISTING_FILE:
                return os.path.isfile(value)
            case ParameterValidationRule.MUST_NOT_EXIST_AS_FILE:
                return not os.path.isfile(value)
            case _:
                raise UnsupportedValidationRule(self)
