"""
Plain-text reports of default settings, parameters and validation results.

Functions return strings; printing or logging them is up to the caller.
"""

from typing import Dict, Optional

from paramstate.default_store import DefaultStore
from paramstate.parameter import Parameter, render_string_value
from paramstate.registry import ParameterRegistry


def format_parameter(parameter: Parameter, indent: int = 0) -> str:
    """Format a parameter's properties as aligned "Label = value" lines.

    The first line carries the parameter's type name; continuation lines are
    padded to line up under it, plus indent extra spaces.
    """
    lines = str(parameter).splitlines()
    type_name, first = lines[0].split(": ", 1)
    pairs = [line.split(" = ", 1) for line in [first] + lines[1:]]
    label_width = max(len(label) for label, _ in pairs)

    formatted = []
    for index, (label, value) in enumerate(pairs):
        prefix = f"{type_name}:" if index == 0 else " " * (len(type_name) + 1 + indent)
        formatted.append(f"{prefix} {label.ljust(label_width)} = {value}")
    return "\n".join(formatted)


def format_default_settings(store: DefaultStore, title: Optional[str] = None) -> str:
    """List every default setting with its type and value."""
    lines = [f"Application Setting Defaults for {title}:" if title else "Application Setting Defaults:"]
    number = 0
    for number, (name, value) in enumerate(store.settings(), start=1):
        lines.append(f"AppSetting # {number:>2}: Name         = {name}")
        lines.append(f"               PropertyType = {type(value).__name__}")
        lines.append(f"               DefaultValue = {value}")
    lines.append(f"Settings count = {number}")
    return "\n".join(lines)


def format_parameter_list(registry: ParameterRegistry, application: str = "application") -> str:
    """List every registered parameter in registry order."""
    lines = [f"The {application} application has {registry.count()} parameters."]
    for number, parameter in enumerate(registry, start=1):
        lines.append(f"    Parameter # {number}: {format_parameter(parameter, indent=19)}")
    lines.append(f"End of {application} parameter list.")
    return "\n".join(lines)


def format_validation_report(registry: ParameterRegistry, results: Dict[str, bool]) -> str:
    """Report the outcome of ParameterRegistry.validate_all()."""
    lines = ["Validating Operating Parameters:"]
    for name, is_valid in results.items():
        parameter = registry.get_by_name(name)
        lines.append(
            f"Parameter {parameter.display_name} value of "
            f"{render_string_value(parameter.value)} is {is_valid}."
        )
    lines.append("End of Parameter Validation Report")
    return "\n".join(lines)
