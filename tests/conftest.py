"""Pytest configuration and shared fixtures."""
import pytest

from paramstate import DefaultStore
import paramstate.config as config_module
import paramstate.default_store as default_store_module
import paramstate.descriptor_table as descriptor_table_module
import paramstate.registry as registry_module


LOG_DIR_TABLE = [
    "InternalName\tParamType",
    "LogDir\tMustBeExistingDirectory",
]

THREE_PARAMETER_TABLE = [
    '"InternalName"\t"ParamType"',
    '"InputFileName"\t"MustBeExistingFile"',
    '"OutputFileName"\t"MustNotExistAsFile"',
    '"WorkingDirectory"\t"MustBeExistingDirectory"',
]


@pytest.fixture(autouse=True)
def reset_module_state():
    """Reset process-wide caches and singletons around each test."""
    # Store original values
    original_resource = config_module._descriptor_resource
    original_lookup = config_module._string_resource_lookup

    descriptor_table_module._column_names = None
    default_store_module._shared_default_store = None
    registry_module._registry = None

    yield

    # Restore original values after test
    config_module._descriptor_resource = original_resource
    config_module._string_resource_lookup = original_lookup
    descriptor_table_module._column_names = None
    default_store_module._shared_default_store = None
    registry_module._registry = None


@pytest.fixture
def log_dir_table():
    """Provide the one-parameter LogDir table."""
    return list(LOG_DIR_TABLE)


@pytest.fixture
def three_parameter_table():
    """Provide a quote-guarded table with one parameter per rule."""
    return list(THREE_PARAMETER_TABLE)


@pytest.fixture
def empty_store():
    """Provide a default store with no settings."""
    return DefaultStore({})


@pytest.fixture
def existing_dir(tmp_path):
    """Provide the path of an existing directory."""
    path = tmp_path / "existing_dir"
    path.mkdir()
    return str(path)


@pytest.fixture
def existing_file(tmp_path):
    """Provide the path of an existing file."""
    path = tmp_path / "existing.txt"
    path.write_text("content")
    return str(path)


@pytest.fixture
def missing_path(tmp_path):
    """Provide a path where nothing exists."""
    return str(tmp_path / "does_not_exist.txt")
