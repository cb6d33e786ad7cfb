"""Fix instructions returned with each antipattern type."""

GGD_FIX_INSTRUCTION = """
# Schema.getGlobalDescribe() - How to Fix

`Schema.getGlobalDescribe()` loads describe information for every SObject in
the org. It costs CPU time on each call and repeated calls add up quickly.

## Inside a loop (HIGH / CRITICAL)

Every iteration reloads the whole schema map. Call it once before the loop,
or cache it in a static variable, and read from the cached map:

```apex
// Before
for (String objectName : objectNames) {
    Schema.SObjectType t = Schema.getGlobalDescribe().get(objectName);
}

// After
Map<String, Schema.SObjectType> globalDescribe = Schema.getGlobalDescribe();
for (String objectName : objectNames) {
    Schema.SObjectType t = globalDescribe.get(objectName);
}
```

When only the type of a dynamic name is needed, `Type.forName(objectName)`
avoids the global describe entirely.

## Several calls in one method or class (MEDIUM)

Keep one cached map per transaction, or switch to
`Schema.describeSObjects(new String[] { objectName }, SObjectDescribeOptions.DEFERRED)`
for describes and `Type.forName(objectName).newInstance()` for new records.

## Known SObject (MEDIUM)

Use the static token instead of a lookup:

```apex
Schema.DescribeSObjectResult dsr = Account.SObjectType.getDescribe();
```

## Applying the fix

1. Use `severity` to pick the case: HIGH/CRITICAL means the call sits in a loop.
2. Read `codeBefore` and decide whether the SObject name is static or dynamic.
3. Rewrite the call with the matching pattern above and keep behavior unchanged.
""".strip()

SOQL_NO_WHERE_LIMIT_FIX_INSTRUCTION = """
# SOQL Without WHERE or LIMIT - How to Fix

A query with neither a WHERE nor a LIMIT clause returns every row of the
object. As data grows this runs into the 50,000 row limit, heap limits and
slow transactions.

## Options

1. Filter with WHERE on the records the logic actually needs, preferably on
   indexed fields:
   ```apex
   List<Account> accounts = [SELECT Id, Name FROM Account WHERE Type = 'Customer'];
   ```
2. Cap the result with LIMIT when only a sample or the first rows are used:
   ```apex
   List<Contact> contacts = [SELECT Id, Email FROM Contact LIMIT 200];
   ```
3. Use both for large objects.
4. With sub-selects, the outer query needs its own WHERE or LIMIT; a filter
   inside the child query does not bound the parent rows.
5. For batch processing of whole tables use `Database.QueryLocator` instead of
   loading a `List<SObject>`.

A finding with HIGH severity is inside a loop: also move the query out of the
loop and bulkify it.
""".strip()

SOQL_UNUSED_FIELDS_FIX_INSTRUCTION = """
# SOQL Unused Fields - How to Fix

The query selects fields that the code never reads afterwards. Every extra
field costs query time, heap and, for long text fields, a lot of memory.

## What the finding contains

- `metadata.unusedFields`: fields with no read after the query
- `metadata.originalFields`: the full select list
- `metadata.assignedVariable`: the variable the result was tied to
- `codeAfter` (when present): the query rewritten without the unused fields

## Steps

1. Confirm each field in `unusedFields` is not read elsewhere through the same
   records, for example after the list is passed to a helper, serialized, or
   stored in a map.
2. Remove the confirmed fields from the SELECT list. Prefer `codeAfter` when it
   is present; otherwise edit `codeBefore` by hand.
3. Keep `Id` and any field used in WHERE, ORDER BY or bind expressions.
4. Leave queries with sub-selects for manual review.

## Example

```apex
// Before
List<Account> accs = [SELECT Id, Name, Phone, Industry FROM Account WHERE Id IN :ids];
for (Account a : accs) {
    System.debug(a.Name);
}

// After
List<Account> accs = [SELECT Id, Name FROM Account WHERE Id IN :ids];
```

## Not reported

Queries whose result is returned, assigned to a class member, consumed as a
whole, or not tied to any variable are skipped, because field usage cannot be
followed there.
""".strip()
