"""Tests for descriptor table parsing."""
import pytest

from paramstate import (
    DuplicateParameterName,
    InvalidValidationRule,
    MalformedDescriptorTable,
    ParameterTypeDescriptor,
    ParameterValidationRule,
    UnknownDescriptorField,
    parse_descriptor_table,
    read_descriptor_rows,
    set_descriptor_resource,
)
from paramstate.descriptor_table import get_column_layout, reset_column_layout, split_row


class TestParse:
    """Test parse_descriptor_table() on well-formed tables."""

    def test_one_descriptor_per_row_in_order(self, three_parameter_table):
        """Every detail row yields one descriptor, keyed by name, in row order."""
        descriptors = parse_descriptor_table(three_parameter_table)

        assert list(descriptors) == ["InputFileName", "OutputFileName", "WorkingDirectory"]
        assert descriptors["InputFileName"] == ParameterTypeDescriptor(
            "InputFileName", ParameterValidationRule.MUST_BE_EXISTING_FILE
        )
        assert descriptors["OutputFileName"].validation_rule is ParameterValidationRule.MUST_NOT_EXIST_AS_FILE
        assert descriptors["WorkingDirectory"].validation_rule is ParameterValidationRule.MUST_BE_EXISTING_DIRECTORY

    def test_unguarded_fields(self, log_dir_table):
        """Quote guards are optional."""
        descriptors = parse_descriptor_table(log_dir_table)

        assert descriptors["LogDir"].validation_rule is ParameterValidationRule.MUST_BE_EXISTING_DIRECTORY

    def test_guards_are_stripped(self):
        """Double-quote guards do not end up in the values."""
        assert split_row('"LogDir"\t"MustBeExistingDirectory"') == ["LogDir", "MustBeExistingDirectory"]

    def test_columns_in_any_order(self):
        """Columns are matched by header name, not position."""
        descriptors = parse_descriptor_table(["ParamType\tInternalName", "MustBeExistingFile\tConfigFile"])

        assert descriptors["ConfigFile"].validation_rule is ParameterValidationRule.MUST_BE_EXISTING_FILE

    def test_missing_param_type_column_leaves_rule_undefined(self):
        """A table without ParamType describes names only."""
        descriptors = parse_descriptor_table(["InternalName", "LogDir"])

        assert descriptors["LogDir"].validation_rule is ParameterValidationRule.UNDEFINED

    def test_blank_rows_are_skipped(self, log_dir_table):
        """Trailing blank lines do not count as rows."""
        descriptors = parse_descriptor_table(log_dir_table + ["", "   "])

        assert list(descriptors) == ["LogDir"]

    def test_header_only_table(self):
        """A header without detail rows describes no parameters."""
        assert parse_descriptor_table(["InternalName\tParamType"]) == {}


class TestErrors:
    """Test parse_descriptor_table() on malformed tables."""

    def test_short_row(self):
        """A row with one fewer field than the header reports both counts."""
        row = "LogDir"
        with pytest.raises(MalformedDescriptorTable) as excinfo:
            parse_descriptor_table(["InternalName\tParamType", row])

        assert excinfo.value.expected == 2
        assert excinfo.value.actual == 1
        assert excinfo.value.row == row
        assert "expected 2" in str(excinfo.value)
        assert "actual 1" in str(excinfo.value)

    def test_long_row(self):
        """A row with an extra field is malformed too."""
        with pytest.raises(MalformedDescriptorTable) as excinfo:
            parse_descriptor_table(["InternalName\tParamType", "LogDir\tMustBeExistingDirectory\textra"])

        assert excinfo.value.actual == 3

    def test_no_rows(self):
        """An empty table has no header."""
        with pytest.raises(MalformedDescriptorTable):
            parse_descriptor_table([])

    def test_invalid_rule(self):
        """An unknown ParamType names the raw value and the column."""
        with pytest.raises(InvalidValidationRule) as excinfo:
            parse_descriptor_table(["InternalName\tParamType", "LogDir\tMustBeSomething"])

        assert excinfo.value.raw_value == "MustBeSomething"
        assert excinfo.value.field_name == "ParamType"

    def test_rule_match_is_case_sensitive(self):
        """Rule spellings must match exactly."""
        with pytest.raises(InvalidValidationRule):
            parse_descriptor_table(["InternalName\tParamType", "LogDir\tmustbeexistingdirectory"])

    def test_unknown_field(self):
        """Header columns outside the known set are rejected by name."""
        with pytest.raises(UnknownDescriptorField) as excinfo:
            parse_descriptor_table(["InternalName\tParamType\tColour", "LogDir\tMustBeExistingDirectory\tred"])

        assert excinfo.value.field_name == "Colour"

    def test_header_without_internal_name(self):
        """The InternalName column is required."""
        with pytest.raises(MalformedDescriptorTable):
            parse_descriptor_table(["ParamType", "MustBeExistingFile"])

    def test_duplicate_names(self):
        """Two rows with the same name are rejected."""
        with pytest.raises(DuplicateParameterName) as excinfo:
            parse_descriptor_table([
                "InternalName\tParamType",
                "LogDir\tMustBeExistingDirectory",
                "LogDir\tMustBeExistingFile",
            ])

        assert excinfo.value.name == "LogDir"


class TestColumnLayoutCache:
    """Test the process-wide header layout cache."""

    def test_layout_parsed_once(self, log_dir_table):
        """A later table's header row is ignored in favour of the cached layout."""
        parse_descriptor_table(log_dir_table)

        # Reversed header would swap the columns if it were honoured
        descriptors = parse_descriptor_table(["ParamType\tInternalName", "ConfigFile\tMustBeExistingFile"])

        assert "ConfigFile" in descriptors
        assert descriptors["ConfigFile"].validation_rule is ParameterValidationRule.MUST_BE_EXISTING_FILE

    def test_reset_column_layout(self, log_dir_table):
        """After a reset the next header is parsed again."""
        parse_descriptor_table(log_dir_table)
        reset_column_layout()

        assert get_column_layout("ParamType\tInternalName") == ("ParamType", "InternalName")

    def test_rejected_header_is_not_cached(self, log_dir_table):
        """A header that fails validation leaves the cache empty."""
        with pytest.raises(UnknownDescriptorField):
            get_column_layout("Bogus")

        assert "LogDir" in parse_descriptor_table(log_dir_table)


class TestPackagedResource:
    """Test reading the packaged descriptor table."""

    def test_default_resource(self):
        """The shipped table parses cleanly."""
        rows = read_descriptor_rows()
        descriptors = parse_descriptor_table(rows)

        assert list(descriptors) == ["InputFileName", "OutputFileName", "WorkingDirectory"]

    def test_configured_resource(self):
        """set_descriptor_resource() changes the default location."""
        set_descriptor_resource("paramstate.data", "ParameterTypeInfo.txt")

        assert read_descriptor_rows()[0] == '"InternalName"\t"ParamType"'

    def test_missing_resource(self):
        """A missing resource propagates the filesystem error."""
        with pytest.raises(FileNotFoundError):
            read_descriptor_rows("paramstate.data", "NoSuchTable.txt")
