"""Tests for field usage heuristics."""

from apexscan.detectors.field_tracker import (
    check_complete_usage,
    find_columns_used_in_later_soqls,
    find_direct_field_access,
    is_returned,
    strip_comments,
)

FIELDS = ["Name", "Phone", "Owner.Email"]


class TestDirectFieldAccess:
    """Test member read detection."""

    def test_variable_member(self):
        """`var.Field` is a read."""
        assert find_direct_field_access("acc", "System.debug(acc.Name);", FIELDS) == {"Name"}

    def test_indexed_member(self):
        """`var[0].Field` is a read."""
        assert find_direct_field_access("accs", "String p = accs[0].Phone;", FIELDS) == {"Phone"}

    def test_loop_alias(self):
        """Reads through a for-each alias count."""
        code = "for (Account a : accs) { System.debug(a.Phone); }"

        assert find_direct_field_access("accs", code, FIELDS) == {"Phone"}

    def test_relationship_path(self):
        """Relationship reads match the selected path, case-insensitively."""
        assert find_direct_field_access("acc", "x = acc.owner.email;", FIELDS) == {"Owner.Email"}

    def test_assignment_is_not_read(self):
        """Writes do not count, comparisons do."""
        assert find_direct_field_access("acc", "acc.Name = 'x';", FIELDS) == set()
        assert find_direct_field_access("acc", "if (acc.Name == 'x') {}", FIELDS) == {"Name"}

    def test_other_variable_ignored(self):
        """Reads through other variables do not count."""
        assert find_direct_field_access("acc", "System.debug(account.Name);", FIELDS) == set()


class TestLaterQueries:
    """Test usage through later queries."""

    def test_field_and_variable_mentioned(self):
        """A later query mentioning the variable and the field uses it."""
        later = ["SELECT Id FROM Contact WHERE Phone IN :accs"]

        assert find_columns_used_in_later_soqls("accs", later, FIELDS) == {"Phone"}

    def test_variable_not_mentioned(self):
        """Queries that do not bind the variable are ignored."""
        later = ["SELECT Id FROM Contact WHERE Phone != null"]

        assert find_columns_used_in_later_soqls("accs", later, FIELDS) == set()


class TestCompleteUsage:
    """Test wholesale consumption detection."""

    def test_passed_to_method(self):
        """Passing the variable as an argument is complete usage."""
        assert check_complete_usage("accs", "process(accs);", FIELDS)

    def test_indexed_element_passed(self):
        """Passing an element is complete usage."""
        assert check_complete_usage("accs", "process(accs[0], true);", FIELDS)

    def test_checks_are_not_usage(self):
        """Null, empty and size checks are not complete usage."""
        code = "if (accs != null && !accs.isEmpty()) { System.debug(accs.size()); }"

        assert not check_complete_usage("accs", code, FIELDS)

    def test_loop_header_and_dml_are_not_usage(self):
        """Iteration and DML on the variable are not complete usage."""
        code = "for (Account a : accs) { a.Name = 'x'; }\nupdate accs;"

        assert not check_complete_usage("accs", code, FIELDS)

    def test_field_read_alongside_bare_reference(self):
        """A bare reference next to a selected field read is not complete usage."""
        code = "System.debug(accs[0].Name); log(accs);"

        assert not check_complete_usage("accs", code, FIELDS)

    def test_commented_reference_ignored(self):
        """References in comments do not count."""
        assert not check_complete_usage("accs", "// process(accs);", FIELDS)


class TestHelpers:
    """Test small helpers."""

    def test_is_returned(self):
        """`return var` is detected on a word boundary."""
        assert is_returned("accs", "return accs;")
        assert not is_returned("accs", "return accsByName;")

    def test_strip_comments(self):
        """Line and block comments are removed."""
        assert strip_comments("a /* b */ c // d\ne") == "a  c \ne"
