"""
Error taxonomy for the operating parameter registry.

Every condition is fatal at the point of detection. Construction-time errors
(malformed descriptor table, invalid rule, default type mismatch) indicate a
broken deployment; per-value errors (empty value, unknown name) indicate a
caller programming error. Each error keeps its diagnostic context as
attributes so callers can report it without re-running.
"""

from typing import Any, Optional


class ParameterError(Exception):
    """Base class for all paramstate errors."""
    pass


class EmptyInternalName(ParameterError, ValueError):
    """Raised when a Parameter is constructed without an internal name."""

    def __init__(self):
        super().__init__("Parameter internal name must be a non-empty string")


class EmptyValue(ParameterError, ValueError):
    """Raised when an empty value is assigned to a Parameter."""

    def __init__(self, parameter_name: str):
        self.parameter_name = parameter_name
        super().__init__(f"Parameter '{parameter_name}' cannot be assigned an empty value")


class UnknownParameterName(ParameterError, KeyError):
    """Raised when a registry lookup names an unregistered parameter."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Argument name '{name}' is undefined")

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class DuplicateParameterName(ParameterError, ValueError):
    """Raised when two descriptors share an internal name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Parameter '{name}' is described more than once")


class MalformedDescriptorTable(ParameterError, ValueError):
    """Raised when a descriptor row does not line up with the header row."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 actual: Optional[int] = None, row: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.row = row
        super().__init__(message)

    @classmethod
    def field_count(cls, expected: int, actual: int, row: str) -> 'MalformedDescriptorTable':
        """Build the field-count mismatch error for one detail row."""
        return cls(
            f"Parameter type information row has the wrong field count: "
            f"expected {expected}, actual {actual}, row={row!r}",
            expected=expected,
            actual=actual,
            row=row,
        )


class InvalidValidationRule(ParameterError, ValueError):
    """Raised when a ParamType cell does not name a validation rule."""

    def __init__(self, raw_value: str, field_name: str, row: Optional[str] = None):
        self.raw_value = raw_value
        self.field_name = field_name
        self.row = row
        super().__init__(
            f"'{raw_value}' is not a valid validation rule "
            f"(column {field_name}, row={row!r})"
        )


class UnknownDescriptorField(ParameterError, ValueError):
    """Raised when the descriptor header names an unsupported column."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            f"Parameter type information column '{field_name}' is undefined and unsupported"
        )


class UnsupportedValidationRule(ParameterError, RuntimeError):
    """Raised when validation is requested for a rule with no predicate."""

    def __init__(self, rule: Any, parameter_name: Optional[str] = None):
        self.rule = rule
        self.parameter_name = parameter_name
        super().__init__(
            f"Validation rule {rule!s} of parameter '{parameter_name}' is unsupported"
        )


class DefaultTypeMismatch(ParameterError, TypeError):
    """Raised when a stored default is not of the expected representation."""

    def __init__(self, name: str, stored_type: type, expected_type: type, stored_value: Any):
        self.name = name
        self.stored_type = stored_type
        self.expected_type = expected_type
        self.stored_value = stored_value
        super().__init__(
            f"Default setting type mismatch: name={name}, "
            f"stored type={stored_type.__name__}, expected type={expected_type.__name__}, "
            f"stored value={stored_value!r}"
        )


class MissingDescriptor(ParameterError, LookupError):
    """Raised when an expected parameter has no descriptor in the loaded table."""

    def __init__(self, name: str, resource: Optional[str] = None):
        self.name = name
        self.resource = resource
        super().__init__(
            f"Type information for the '{name}' parameter cannot be found in {resource or 'the descriptor table'}"
        )


class ParameterNotInitialized(ParameterError, RuntimeError):
    """Raised when a parameter without a value is validated."""

    def __init__(self, parameter_name: str):
        self.parameter_name = parameter_name
        super().__init__(f"Parameter '{parameter_name}' has no value to validate")
