"""Pytest configuration and fixtures."""

import pytest

from apexscan.models import (
    ClassRuntimeData,
    EntrypointData,
    MethodRuntimeData,
    SOQLRuntimeData,
)

# Sample Apex code for testing
SAMPLE_APEX_SIMPLE = """
public with sharing class Greeter {
    public String greet(String name) {
        return 'Hello, ' + name;
    }
}
"""

SAMPLE_APEX_GGD = """
public class SchemaHelper {
    public static Schema.SObjectType lookup(String name) {
        Map<String, Schema.SObjectType> gd = Schema.getGlobalDescribe();
        return gd.get(name);
    }

    public static void lookupAll(List<String> names) {
        Integer i = 0;
        while (i < names.size()) {
            Schema.SObjectType t = Schema.getGlobalDescribe().get(names[i]);
            i++;
        }
    }
}
"""

SAMPLE_APEX_QUERY_IN_LOOP = """
public class AccountLoader {
    public void load(List<Id> ids) {
        for (Id recordId : ids) {
            List<Account> accs = [SELECT Id, Name FROM Account];
            System.debug(accs[0].Name);
        }
    }
}
"""

SAMPLE_APEX_UNUSED_FIELDS = """
public class AccountPrinter {
    public void print() {
        List<Account> accs = [SELECT Id, Name, Phone FROM Account WHERE Industry = 'Tech'];
        for (Account a : accs) { System.debug(a.Name); }
    }
}
"""

SAMPLE_APEX_RETURNED_QUERY = """
public class AccountSelector {
    public List<Account> selectAll() {
        return [SELECT Id, Name, Phone FROM Account WHERE Industry = 'Tech'];
    }
}
"""

SAMPLE_APEX_MIXED_BOUNDS = """
public class ContactService {
    public void run() {
        List<Contact> recent = [SELECT Id FROM Contact WHERE CreatedDate = TODAY];
        List<Contact> firstTen = [SELECT Id FROM Contact LIMIT 10];
        List<Contact> everything = [SELECT Id FROM Contact];
        System.debug(recent.size() + firstTen.size() + everything.size());
    }
}
"""

SAMPLE_APEX_MALFORMED = """
public class Broken {
    public void run() {
        if (true {
    }
"""


@pytest.fixture
def sample_apex_simple():
    """Class without antipatterns."""
    return SAMPLE_APEX_SIMPLE


@pytest.fixture
def sample_apex_ggd():
    """Global describe calls inside and outside a loop."""
    return SAMPLE_APEX_GGD


@pytest.fixture
def sample_apex_query_in_loop():
    """Unbounded query inside a for loop."""
    return SAMPLE_APEX_QUERY_IN_LOOP


@pytest.fixture
def sample_apex_unused_fields():
    """Query with a field that is never read."""
    return SAMPLE_APEX_UNUSED_FIELDS


@pytest.fixture
def sample_apex_returned_query():
    """Query returned directly from the method."""
    return SAMPLE_APEX_RETURNED_QUERY


@pytest.fixture
def sample_apex_mixed_bounds():
    """Two bounded queries and one unbounded query."""
    return SAMPLE_APEX_MIXED_BOUNDS


@pytest.fixture
def sample_apex_malformed():
    """Unparseable class."""
    return SAMPLE_APEX_MALFORMED


@pytest.fixture
def ggd_class_data():
    """Runtime data for SchemaHelper methods."""
    return ClassRuntimeData(
        methods=[
            MethodRuntimeData(
                method_name="lookup",
                entrypoints=[
                    EntrypointData(
                        entrypoint_name="AccountTrigger",
                        avg_cpu_time=2500,
                        avg_db_time=40,
                        sum_cpu_time=125000,
                        sum_db_time=2000,
                    ),
                    EntrypointData(
                        entrypoint_name="NightlyBatch",
                        avg_cpu_time=300,
                        avg_db_time=10,
                        sum_cpu_time=15000,
                        sum_db_time=500,
                    ),
                ],
            ),
        ],
    )


@pytest.fixture
def soql_class_data():
    """Runtime data for the query in AccountLoader."""
    return ClassRuntimeData(
        soql_runtime_data=[
            SOQLRuntimeData(
                unique_query_identifier="AccountLoader.cls.5",
                representative_count=20_000_000,
                total_query_execution_time=1_500,
            ),
        ],
    )
