"""
ParameterRegistry: keyed collection of the application's operating parameters.

The registry is built from the descriptor table. It constructs one Parameter
per descriptor (each seeded from the default store), then lets the caller
apply overrides and validate everything in one pass:

    registry = get_parameter_registry(DefaultStore(settings))
    registry.apply_overrides(CommandLineOverrides(sys.argv[1:], registry.names()))
    results = registry.validate_all()

get_parameter_registry() creates and loads the process-wide registry on its
first call only. Use reload_parameter_registry() to rebuild it explicitly.
"""

import logging
import threading
from typing import Callable, Dict, Iterator, List, Optional, Sequence

from paramstate.config import (
    DEFAULT_DISPLAY_NAME_TEMPLATE,
    StringResourceLookup,
    get_descriptor_resource,
)
from paramstate.default_store import DefaultStore
from paramstate.descriptor_table import parse_descriptor_table, read_descriptor_rows
from paramstate.errors import MissingDescriptor, ParameterError, UnknownParameterName
from paramstate.parameter import Parameter
from paramstate.parameter_types import ParameterSource
from paramstate.string_resources import StringResources

logger = logging.getLogger(__name__)

OverrideLookup = Callable[[str], Optional[str]]


class ParameterRegistry:
    """Insertion-ordered mapping of internal name to Parameter.

    Parameters are never removed; they only change through set_value().
    Not thread-safe: load, apply_overrides and set_value are expected to run
    in a single startup phase.
    """

    def __init__(self):
        self._parameters: Dict[str, Parameter] = {}

    def load(
        self,
        default_store: Optional[DefaultStore],
        display_name_template: Optional[str] = None,
        default_source: ParameterSource = ParameterSource.FROM_DEFAULT_STORE,
        rows: Optional[Sequence[str]] = None,
        string_lookup: Optional[StringResourceLookup] = None,
        localized_display_names: bool = False,
    ) -> 'ParameterRegistry':
        """(Re)build every parameter from freshly parsed descriptors.

        Args:
            default_store: Store consulted for each parameter's initial value
            display_name_template: Display name or template given to every parameter
            default_source: Source recorded for values found in default_store
            rows: Descriptor table rows; None reads the packaged resource
            string_lookup: Lookup for templated display names
            localized_display_names: Fall back to DEFAULT_DISPLAY_NAME_TEMPLATE
                                     and, without string_lookup, to the packaged
                                     display names

        Returns:
            self

        Raises:
            MalformedDescriptorTable, UnknownDescriptorField,
            InvalidValidationRule, DuplicateParameterName: bad descriptor table
            DefaultTypeMismatch: default store holds a non-string value
        """
        if localized_display_names:
            if display_name_template is None:
                display_name_template = DEFAULT_DISPLAY_NAME_TEMPLATE
            if string_lookup is None:
                string_lookup = StringResources.packaged_display_names()

        try:
            if rows is None:
                rows = read_descriptor_rows()
            descriptors = parse_descriptor_table(rows)

            parameters: Dict[str, Parameter] = {}
            for name, descriptor in descriptors.items():
                parameters[name] = Parameter(
                    internal_name=name,
                    display_name=display_name_template,
                    validation_rule=descriptor.validation_rule,
                    default_source=default_source,
                    default_store=default_store,
                    string_lookup=string_lookup,
                )
        except (ParameterError, OSError) as e:
            logger.error(f"Failed to load operating parameters: {e}")
            raise

        overridden = [p.internal_name for p in self._parameters.values() if p.saved_default_value is not None]
        if overridden:
            logger.warning(f"Reloading registry discards overridden values of: {', '.join(overridden)}")

        # Swap only after every parameter was built
        self._parameters = parameters
        logger.info(f"Loaded {len(parameters)} operating parameter(s)")
        return self

    # ========== LOOKUP AND ENUMERATION ==========

    def get_by_name(self, name: str) -> Parameter:
        """Get a parameter by internal name.

        Raises:
            UnknownParameterName: no parameter has that name
        """
        try:
            return self._parameters[name]
        except KeyError:
            raise UnknownParameterName(name) from None

    def require(self, *names: str) -> None:
        """Check that every expected parameter has a descriptor.

        Raises:
            MissingDescriptor: for the first name absent from the loaded table
        """
        for name in names:
            if name not in self._parameters:
                _, resource = get_descriptor_resource()
                raise MissingDescriptor(name, resource)

    def names(self) -> List[str]:
        """Parameter names in descriptor load order."""
        return list(self._parameters)

    def count(self) -> int:
        """Number of loaded parameters."""
        return len(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, name: str) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._parameters.values())

    # ========== BULK OPERATIONS ==========

    def apply_overrides(
        self,
        override_lookup: OverrideLookup,
        source: ParameterSource = ParameterSource.FROM_OVERRIDE_STORE,
    ) -> List[str]:
        """Assign every parameter for which override_lookup has a non-empty value.

        Args:
            override_lookup: name -> value, or None when there is no override
            source: Source recorded for overridden values

        Returns:
            Names of the parameters that were overridden, in registry order
        """
        applied = []
        for name, parameter in self._parameters.items():
            value = override_lookup(name)
            if value:
                parameter.set_value(value, source)
                applied.append(name)
        logger.debug(f"Applied {len(applied)} override(s): {applied}")
        return applied

    def validate_all(self) -> Dict[str, bool]:
        """Validate every parameter in registry order.

        Returns:
            name -> validation result

        Raises:
            ParameterNotInitialized: a parameter has no value
            UnsupportedValidationRule: a parameter's rule is UNDEFINED
        """
        results = {name: parameter.validate() for name, parameter in self._parameters.items()}
        failed = [name for name, ok in results.items() if not ok]
        if failed:
            logger.info(f"{len(failed)} of {len(results)} parameter(s) failed validation: {failed}")
        return results


# Process-wide registry
_registry: Optional[ParameterRegistry] = None
_registry_lock = threading.Lock()


def get_parameter_registry(
    default_store: Optional[DefaultStore] = None,
    display_name_template: Optional[str] = None,
    default_source: ParameterSource = ParameterSource.FROM_DEFAULT_STORE,
    rows: Optional[Sequence[str]] = None,
    string_lookup: Optional[StringResourceLookup] = None,
    localized_display_names: bool = False,
) -> ParameterRegistry:
    """Get the process-wide registry, creating and loading it on first call.

    Arguments are only used by the first call; later calls return the same
    instance unchanged.
    """
    global _registry
    with _registry_lock:
        if _registry is None:
            registry = ParameterRegistry().load(
                default_store, display_name_template, default_source, rows, string_lookup,
                localized_display_names,
            )
            _registry = registry
            logger.info("Created process-wide parameter registry")
        return _registry


def reload_parameter_registry(
    default_store: Optional[DefaultStore] = None,
    display_name_template: Optional[str] = None,
    default_source: ParameterSource = ParameterSource.FROM_DEFAULT_STORE,
    rows: Optional[Sequence[str]] = None,
    string_lookup: Optional[StringResourceLookup] = None,
    localized_display_names: bool = False,
) -> ParameterRegistry:
    """Rebuild the process-wide registry in place (creating it if needed).

    Callers holding the registry see the new parameters.
    """
    global _registry
    with _registry_lock:
        registry = _registry if _registry is not None else ParameterRegistry()
        registry.load(
            default_store, display_name_template, default_source, rows, string_lookup,
            localized_display_names,
        )
        _registry = registry
        logger.info("Reloaded process-wide parameter registry")
        return registry


def reset_parameter_registry() -> None:
    """Drop the process-wide registry. For testing only."""
    global _registry
    with _registry_lock:
        _registry = None
