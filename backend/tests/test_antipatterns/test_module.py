"""Tests for antipattern modules."""

import pytest
from unittest.mock import MagicMock

from apexscan.antipatterns import AntipatternModule
from apexscan.detectors import GGDDetector, SOQLNoWhereLimitDetector, SOQLUnusedFieldsDetector
from apexscan.enrichers import MethodRuntimeEnricher, SOQLRuntimeEnricher
from apexscan.models import AntipatternType, Severity, SeveritySource
from apexscan.recommenders import GGDRecommender, SOQLUnusedFieldsRecommender
from apexscan.recommenders.instructions import GGD_FIX_INSTRUCTION


class TestModuleConstruction:
    """Test type consistency checks."""

    def test_mismatched_recommender(self):
        """A recommender for another type is rejected."""
        with pytest.raises(ValueError, match="must match"):
            AntipatternModule(GGDDetector(), SOQLUnusedFieldsRecommender())

    def test_unsupported_enricher(self):
        """An enricher that does not handle the type is rejected."""
        with pytest.raises(ValueError, match="does not handle"):
            AntipatternModule(GGDDetector(), GGDRecommender(), SOQLRuntimeEnricher())

    def test_type_comes_from_detector(self):
        """The module reports its detector's type."""
        module = AntipatternModule(SOQLNoWhereLimitDetector())

        assert module.antipattern_type == AntipatternType.SOQL_NO_WHERE_LIMIT


class TestModuleScan:
    """Test detect, recommend and enrich."""

    def test_scan_static(self, sample_apex_ggd):
        """Without runtime data findings keep static severities."""
        module = AntipatternModule(GGDDetector(), GGDRecommender(), MethodRuntimeEnricher())

        result = module.scan("SchemaHelper", sample_apex_ggd)

        assert result.antipattern_type == AntipatternType.GGD
        assert result.fix_instruction == GGD_FIX_INSTRUCTION
        assert [d.severity for d in result.detected_instances] == [Severity.MEDIUM, Severity.HIGH]
        assert all(d.severity_source == SeveritySource.STATIC for d in result.detected_instances)

    def test_scan_with_runtime_data(self, sample_apex_ggd, ggd_class_data):
        """Runtime data is applied to matching findings."""
        module = AntipatternModule(GGDDetector(), GGDRecommender(), MethodRuntimeEnricher())

        result = module.scan("SchemaHelper", sample_apex_ggd, ggd_class_data)

        lookup, lookup_all = result.detected_instances
        assert lookup.severity == Severity.CRITICAL
        assert lookup.severity_source == SeveritySource.RUNTIME
        assert lookup_all.severity == Severity.HIGH
        assert lookup_all.severity_source == SeveritySource.STATIC

    def test_default_instruction_without_recommender(self, sample_apex_ggd):
        """Modules without a recommender use a generic instruction."""
        module = AntipatternModule(GGDDetector())

        result = module.scan("SchemaHelper", sample_apex_ggd)

        assert result.fix_instruction == "GGD antipattern detected. Manual review and fix recommended."

    def test_no_findings(self, sample_apex_simple):
        """A clean class yields an empty result."""
        module = AntipatternModule(GGDDetector(), GGDRecommender())

        result = module.scan("Greeter", sample_apex_simple)

        assert result.detected_instances == []
        assert result.fix_instruction == ""

    def test_recommender_runs_per_instance(self, sample_apex_unused_fields):
        """The recommender fills codeAfter on each finding."""
        module = AntipatternModule(SOQLUnusedFieldsDetector(), SOQLUnusedFieldsRecommender(), SOQLRuntimeEnricher())

        result = module.scan("AccountPrinter", sample_apex_unused_fields)

        assert result.detected_instances[0].code_after == "SELECT Id, Name FROM Account WHERE Industry = 'Tech'"

    def test_enricher_skipped_without_data(self, sample_apex_ggd):
        """The enricher is not consulted when there is no runtime data."""
        enricher = MagicMock(spec=MethodRuntimeEnricher)
        enricher.supports.return_value = True
        module = AntipatternModule(GGDDetector(), GGDRecommender(), enricher)

        module.scan("SchemaHelper", sample_apex_ggd)

        enricher.enrich.assert_not_called()
