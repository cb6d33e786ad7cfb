"""Tests for the Schema.getGlobalDescribe() detector."""

import pytest
from apexscan.detectors import GGDDetector
from apexscan.detectors.ggd_detector import is_global_describe_call
from apexscan.models import AntipatternType, Severity, SeveritySource
from apexscan.parsers.apex_parser import ApexParser, walk


class TestGGDDetector:
    """Test global describe detection."""

    @pytest.fixture
    def detector(self):
        return GGDDetector()

    def test_antipattern_type(self, detector):
        """Detector reports the GGD type."""
        assert detector.antipattern_type == AntipatternType.GGD

    def test_detects_call_outside_loop(self, detector, sample_apex_ggd):
        """A call outside any loop is MEDIUM severity."""
        detections = detector.detect("SchemaHelper", sample_apex_ggd)

        first = detections[0]
        assert first.line_number == 4
        assert first.method_name == "lookup"
        assert first.severity == Severity.MEDIUM
        assert first.severity_source == SeveritySource.STATIC
        assert first.code_before == "Map<String, Schema.SObjectType> gd = Schema.getGlobalDescribe();"

    def test_detects_call_inside_while_loop(self, detector, sample_apex_ggd):
        """A call inside a while loop is HIGH severity."""
        detections = detector.detect("SchemaHelper", sample_apex_ggd)

        assert len(detections) == 2
        second = detections[1]
        assert second.line_number == 11
        assert second.method_name == "lookupAll"
        assert second.severity == Severity.HIGH

    def test_no_calls(self, detector, sample_apex_simple):
        """Classes without the call produce nothing."""
        assert detector.detect("Greeter", sample_apex_simple) == []

    def test_case_insensitive_and_qualified(self, detector):
        """Matching ignores case and accepts System.Schema."""
        code = """
public class Mixed {
    void a() { Map<String, SObjectType> m = schema.GETGLOBALDESCRIBE(); }
    void b() { Map<String, SObjectType> m = System.Schema.getGlobalDescribe(); }
}
"""
        detections = detector.detect("Mixed", code)

        assert [d.method_name for d in detections] == ["a", "b"]

    def test_other_receivers_ignored(self, detector):
        """Only calls on Schema count."""
        code = """
public class Lookalike {
    void a() { Object o = Util.getGlobalDescribe(); }
}
"""
        assert detector.detect("Lookalike", code) == []

    def test_comments_and_strings_ignored(self, detector):
        """Calls inside comments or string literals are not code."""
        code = """
public class Quiet {
    // Schema.getGlobalDescribe();
    void a() { String s = 'Schema.getGlobalDescribe()'; }
}
"""
        assert detector.detect("Quiet", code) == []

    def test_loop_nesting_resets_per_method(self, detector):
        """Loop depth does not leak across method boundaries."""
        code = """
public class Loops {
    void a() {
        for (Integer i = 0; i < 3; i++) {
            do {
                Schema.getGlobalDescribe();
            } while (false);
        }
    }
    void b() {
        Schema.getGlobalDescribe();
    }
}
"""
        detections = detector.detect("Loops", code)

        assert [d.severity for d in detections] == [Severity.HIGH, Severity.MEDIUM]

    def test_loop_iterable_not_in_loop(self, detector):
        """The iterable of a for-each loop is evaluated once."""
        code = """
public class Iterable {
    void a() {
        for (String name : Schema.getGlobalDescribe().keySet()) {
            System.debug(name);
        }
    }
}
"""
        detections = detector.detect("Iterable", code)

        assert len(detections) == 1
        assert detections[0].severity == Severity.MEDIUM

    def test_class_level_call_has_no_method(self, detector):
        """Calls in field initializers carry no method name."""
        code = """
public class Holder {
    static Map<String, Schema.SObjectType> GD = Schema.getGlobalDescribe();
}
"""
        detections = detector.detect("Holder", code)

        assert len(detections) == 1
        assert detections[0].method_name is None

    def test_unparseable_class(self, detector, sample_apex_malformed):
        """Syntax errors yield no findings instead of raising."""
        assert detector.detect("Broken", sample_apex_malformed) == []


class TestIsGlobalDescribeCall:
    """Test the call predicate."""

    @staticmethod
    def calls(body):
        code = f"public class Sample {{\n    void run() {{\n        {body}\n    }}\n}}\n"
        return [n for n in walk(ApexParser().parse(code)) if n.type == "method_invocation"]

    def test_plain_call(self):
        """Unqualified calls are not matched."""
        assert not is_global_describe_call(self.calls("getGlobalDescribe();")[0])

    def test_schema_call(self):
        """Schema-qualified calls are matched."""
        assert is_global_describe_call(self.calls("Schema.getGlobalDescribe();")[0])
