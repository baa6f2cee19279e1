"""
Parameter: one named operating parameter.

A Parameter tracks its value, where that value came from, and how far it has
progressed through its lifecycle:

    UNINITIALIZED --(default found / set_value)--> INITIALIZED --(validate ok)--> VALIDATED

Values are always strings. The first time a default taken from the default
store is overwritten, the default is kept in saved_default_value so callers
can report what was overridden.
"""

import logging
from typing import Optional

from paramstate.config import (
    DISPLAY_NAME_SUBSTITUTION_TOKEN,
    StringResourceLookup,
    get_string_resource_lookup,
)
from paramstate.default_store import DefaultStore
from paramstate.errors import (
    EmptyInternalName,
    EmptyValue,
    ParameterNotInitialized,
    UnsupportedValidationRule,
)
from paramstate.parameter_types import ParameterSource, ParameterState, ParameterValidationRule

logger = logging.getLogger(__name__)

RENDERED_NULL = "[Null]"
RENDERED_EMPTY = "[Empty]"


def render_string_value(value: Optional[str]) -> str:
    """Render a possibly missing string for display."""
    if value is None:
        return RENDERED_NULL
    if value == "":
        return RENDERED_EMPTY
    return value


class Parameter:
    """
    A named operating parameter with a string value.

    Attributes exposed read-only:
    - internal_name: identity key, never empty
    - display_name: human-facing name (possibly localized)
    - value: current value, None until initialized
    - saved_default_value: store default captured by its first override
    - source: ParameterSource of the current value
    - state: ParameterState
    - validation_rule: ParameterValidationRule, fixed at construction
    - has_default_from_store: whether the default store had an entry
    """

    def __init__(
        self,
        internal_name: str,
        display_name: Optional[str] = None,
        validation_rule: ParameterValidationRule = ParameterValidationRule.UNDEFINED,
        default_source: ParameterSource = ParameterSource.FROM_DEFAULT_STORE,
        default_store: Optional[DefaultStore] = None,
        string_lookup: Optional[StringResourceLookup] = None,
    ):
        """
        Args:
            internal_name: Identity key of the parameter
            display_name: Display name, or a template containing "{0}" that is
                          formatted with internal_name and looked up as a
                          string-resource name
            validation_rule: Rule applied by validate()
            default_source: Source recorded when the default store has a value
            default_store: Store consulted for the initial value (None = no defaults)
            string_lookup: Lookup for templated display names
                           (default from paramstate.config)

        Raises:
            EmptyInternalName: internal_name is empty
            DefaultTypeMismatch: default store holds a non-string value
        """
        if not internal_name:
            raise EmptyInternalName()

        self._internal_name = internal_name
        if string_lookup is None:
            string_lookup = get_string_resource_lookup()
        self._display_name = self._resolve_display_name(internal_name, display_name, string_lookup)
        self._validation_rule = validation_rule
        self._value: Optional[str] = None
        self._saved_default_value: Optional[str] = None
        self._source = ParameterSource.UNDEFINED
        self._state = ParameterState.UNINITIALIZED
        self._has_default_from_store = False

        default_value = default_store.resolve(internal_name) if default_store is not None else None
        if default_value is not None:
            self._value = default_value
            self._has_default_from_store = True
            self._source = default_source
            self._state = ParameterState.INITIALIZED
            logger.debug(f"Parameter {internal_name}: default {default_value!r} from {default_source.name}")

    # ========== PROPERTIES ==========

    @property
    def internal_name(self) -> str:
        return self._internal_name

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def saved_default_value(self) -> Optional[str]:
        return self._saved_default_value

    @property
    def source(self) -> ParameterSource:
        return self._source

    @property
    def state(self) -> ParameterState:
        return self._state

    @property
    def validation_rule(self) -> ParameterValidationRule:
        return self._validation_rule

    @property
    def has_default_from_store(self) -> bool:
        return self._has_default_from_store

    # ========== VALUE ASSIGNMENT AND VALIDATION ==========

    def set_value(self, new_value: str, source: ParameterSource) -> None:
        """Assign a new value.

        The first overwrite of a store default saves that default in
        saved_default_value. Any assignment leaves the parameter INITIALIZED,
        so a previously validated value must be validated again.

        Raises:
            EmptyValue: new_value is empty or None
        """
        if not new_value:
            raise EmptyValue(self._internal_name)

        # Only the store default itself is ever saved
        if self._has_default_from_store and self._saved_default_value is None:
            self._saved_default_value = self._value

        self._state = ParameterState.INITIALIZED
        self._source = source
        self._value = new_value
        logger.debug(f"Parameter {self._internal_name}: set to {new_value!r} from {source.name}")

    def validate(self) -> bool:
        """Check the value against the validation rule.

        Returns:
            True if the value satisfies the rule; the state becomes VALIDATED.
            False otherwise; the state is left as it was.

        Raises:
            ParameterNotInitialized: there is no value to check
            UnsupportedValidationRule: the rule has no predicate (UNDEFINED)
        """
        if self._value is None:
            raise ParameterNotInitialized(self._internal_name)
        try:
            is_valid = self._validation_rule.is_satisfied_by(self._value)
        except UnsupportedValidationRule:
            raise UnsupportedValidationRule(self._validation_rule, self._internal_name) from None
        if is_valid:
            self._state = ParameterState.VALIDATED
        logger.debug(
            f"Parameter {self._internal_name}: {self._value!r} "
            f"{'satisfies' if is_valid else 'fails'} {self._validation_rule.name}"
        )
        return is_valid

    # ========== DISPLAY ==========

    @staticmethod
    def _resolve_display_name(
        internal_name: str,
        display_name: Optional[str],
        string_lookup: StringResourceLookup,
    ) -> str:
        if not display_name:
            return internal_name
        if DISPLAY_NAME_SUBSTITUTION_TOKEN not in display_name:
            return display_name
        resource_name = display_name.replace(DISPLAY_NAME_SUBSTITUTION_TOKEN, internal_name)
        return string_lookup(resource_name) or internal_name

    def _sort_key(self):
        # Missing values sort before every string
        return (self._value is not None, self._value or "")

    def __lt__(self, other: 'Parameter') -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(internal_name={self._internal_name!r}, "
            f"value={self._value!r}, state={self._state.name}, source={self._source.name})"
        )

    def __str__(self) -> str:
        return "\n".join([
            f"{type(self).__name__}: InternalName = {self._internal_name}",
            f"DisplayName = {render_string_value(self._display_name)}",
            f"ParamValue = {render_string_value(self._value)}",
            f"ParamType = {self._validation_rule.value}",
            f"HasDefaultValueInAppSettings = {self._has_default_from_store}",
            f"ParamState = {self._state.value}",
            f"ParamSource = {self._source.value}",
            f"SavedDefaultValue = {render_string_value(self._saved_default_value)}",
        ])
