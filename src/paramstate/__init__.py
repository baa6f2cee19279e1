"""
Typed operating-parameter registry for command-line programs.

Declares named operating parameters from a packaged descriptor table,
resolves each value from the application defaults and then from
command-line overrides, tracks where every value came from, and validates
the final values against filesystem rules.

Quick Start:
    >>> import sys
    >>> from paramstate import (
    ...     DefaultStore,
    ...     CommandLineOverrides,
    ...     get_parameter_registry,
    ... )
    >>>
    >>> registry = get_parameter_registry(DefaultStore({"WorkingDirectory": "/tmp"}))
    >>> registry.apply_overrides(CommandLineOverrides(sys.argv[1:], registry.names()))
    >>> results = registry.validate_all()

Resolution order:
    Descriptor table -> default store -> override store -> validation

    Each Parameter moves UNINITIALIZED -> INITIALIZED -> VALIDATED. The first
    override of a store default keeps the default in saved_default_value.

Modules:
    - parameter_types: state, source and validation-rule enumerations
    - descriptor_table: parsing of the tab-delimited descriptor table
    - default_store: application defaults and the default-value resolver
    - parameter: a single operating parameter
    - registry: the parameter collection and its process-wide accessor
    - overrides: command-line override store
    - string_resources: display-name string lookup
    - report: plain-text reports
    - config: framework configuration
    - errors: error taxonomy
"""

# Enumerations
from paramstate.parameter_types import (
    ParameterState,
    ParameterSource,
    ParameterValidationRule,
)

# Errors
from paramstate.errors import (
    ParameterError,
    EmptyInternalName,
    EmptyValue,
    UnknownParameterName,
    DuplicateParameterName,
    MalformedDescriptorTable,
    InvalidValidationRule,
    UnknownDescriptorField,
    UnsupportedValidationRule,
    DefaultTypeMismatch,
    MissingDescriptor,
    ParameterNotInitialized,
)

# Descriptor table
from paramstate.descriptor_table import (
    ParameterTypeDescriptor,
    parse_descriptor_table,
    read_descriptor_rows,
)

# Default store
from paramstate.default_store import (
    DefaultStore,
    get_shared_default_store,
)

# Parameter and registry
from paramstate.parameter import Parameter
from paramstate.registry import (
    ParameterRegistry,
    get_parameter_registry,
    reload_parameter_registry,
)

# Collaborators
from paramstate.overrides import CommandLineOverrides
from paramstate.string_resources import StringResources

# Configuration
from paramstate.config import (
    set_descriptor_resource,
    get_descriptor_resource,
    set_string_resource_lookup,
    get_string_resource_lookup,
)

__all__ = [
    # Enumerations
    'ParameterState',
    'ParameterSource',
    'ParameterValidationRule',
    # Errors
    'ParameterError',
    'EmptyInternalName',
    'EmptyValue',
    'UnknownParameterName',
    'DuplicateParameterName',
    'MalformedDescriptorTable',
    'InvalidValidationRule',
    'UnknownDescriptorField',
    'UnsupportedValidationRule',
    'DefaultTypeMismatch',
    'MissingDescriptor',
    'ParameterNotInitialized',
    # Descriptor table
    'ParameterTypeDescriptor',
    'parse_descriptor_table',
    'read_descriptor_rows',
    # Default store
    'DefaultStore',
    'get_shared_default_store',
    # Parameter and registry
    'Parameter',
    'ParameterRegistry',
    'get_parameter_registry',
    'reload_parameter_registry',
    # Collaborators
    'CommandLineOverrides',
    'StringResources',
    # Configuration
    'set_descriptor_resource',
    'get_descriptor_resource',
    'set_string_resource_lookup',
    'get_string_resource_lookup',
]

__version__ = '1.0.0'
__description__ = 'Typed operating-parameter registry for command-line programs'
