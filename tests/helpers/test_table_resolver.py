import pytest

from casino_eats.core.exceptions.errors import InvalidTableNumberError, ManualEntryDisabledError
from casino_eats.enums.table_source import TableSource
from casino_eats.helpers.table.table_resolver import TableAssignmentResolver, parse_table_number


class TestParseTableNumber:
    @pytest.mark.parametrize("raw, expected", [
        ("1", 1),
        ("12", 12),
        (" 42 ", 42),
        ("500", 500),
        (7, 7),
    ])
    def test_valid_values(self, raw, expected):
        assert parse_table_number(raw) == expected

    @pytest.mark.parametrize("raw", [
        None, "", "0", 0, "501", 501, "-3", -3, "abc", "12abc", "3.5", 3.5, True, "+4",
    ])
    def test_invalid_values_are_absent(self, raw):
        assert parse_table_number(raw) is None

    def test_custom_bounds(self):
        assert parse_table_number("0", minimum=0, maximum=10) == 0
        assert parse_table_number("11", minimum=0, maximum=10) is None


class TestFromLink:
    def test_link_value_is_authoritative(self):
        resolver = TableAssignmentResolver("12")

        assert resolver.selection.table_number == 12
        assert resolver.selection.source == TableSource.FROM_LINK
        assert resolver.manual_entry_enabled is False

    def test_manual_entry_disabled_with_link(self):
        resolver = TableAssignmentResolver("12")

        with pytest.raises(ManualEntryDisabledError):
            resolver.enter_manual("15")
        assert resolver.selection.table_number == 12

    @pytest.mark.parametrize("raw", ["0", "999", "mesa", None])
    def test_invalid_link_leaves_selection_absent(self, raw):
        resolver = TableAssignmentResolver(raw)

        assert resolver.selection.is_resolved is False
        assert resolver.selection.source is None
        assert resolver.manual_entry_enabled is True


class TestManualEntry:
    def test_valid_manual_value(self):
        resolver = TableAssignmentResolver()

        selection = resolver.enter_manual("25")

        assert selection.table_number == 25
        assert selection.source == TableSource.MANUAL_ENTRY

    def test_manual_value_can_be_changed(self):
        resolver = TableAssignmentResolver()
        resolver.enter_manual("25")
        resolver.enter_manual(30)

        assert resolver.selection.table_number == 30

    @pytest.mark.parametrize("raw", ["abc", "0", "-1", "501", ""])
    def test_invalid_manual_value_resets_selection(self, raw):
        resolver = TableAssignmentResolver()
        resolver.enter_manual("25")

        with pytest.raises(InvalidTableNumberError):
            resolver.enter_manual(raw)

        assert resolver.selection.table_number is None
        assert resolver.selection.source is None

    def test_listeners_receive_every_change(self):
        resolver = TableAssignmentResolver()
        seen = []
        resolver.subscribe(lambda selection: seen.append(selection.table_number))

        resolver.enter_manual("4")
        with pytest.raises(InvalidTableNumberError):
            resolver.enter_manual("x")

        assert seen == [4, None]
