import pytest
import sdkgen

from sdkgen.codec import schema
from sdkgen.errors import SchemaParseError


def dumps(value):
    return sdkgen.json.dumps(value).decode()


def test_absent():
    assert schema.resolve(None) is None


def test_records():

    record = {'type': 'record', 'name': 'ClassA', 'namespace': 'pkg', 'fields': []}
    assert schema.resolve(dumps(record)) == 'pkg.ClassA'
    assert schema.resolve(dumps(record).encode()) == 'pkg.ClassA'

    # A dotted name is already fully qualified; the namespace is ignored.
    record['name'] = 'other.ClassA'
    assert schema.resolve(dumps(record)) == 'other.ClassA'

    del record['namespace']
    record['name'] = 'ClassA'
    assert schema.resolve(dumps(record)) == 'ClassA'

    error = {'type': 'error', 'name': 'Failure', 'namespace': 'pkg', 'fields': []}
    assert schema.resolve(dumps(error)) == 'pkg.Failure'


def test_other_named_types():

    enum = {'type': 'enum', 'name': 'Color', 'namespace': 'pkg', 'symbols': ['RED']}
    assert schema.resolve(dumps(enum)) == 'pkg.Color'

    fixed = {'type': 'fixed', 'name': 'Md5', 'namespace': 'pkg', 'size': 16}
    assert schema.resolve(dumps(fixed)) == 'pkg.Md5'


def test_unnamed_types():

    assert schema.resolve('"string"') == 'string'
    assert schema.resolve('{"type": "long"}') == 'long'
    assert schema.resolve('{"type": "array", "items": "int"}') == 'array'
    assert schema.resolve('{"type": "map", "values": "int"}') == 'map'
    assert schema.resolve('["null", "string"]') == 'union'


def test_nested_types():

    inner = {'type': 'record', 'name': 'Inner', 'fields': [{'name': 'value', 'type': 'long'}]}

    fields = list()
    fields.append({'name': 'inner', 'type': inner})
    fields.append({'name': 'again', 'type': 'Inner'})
    fields.append({'name': 'qualified', 'type': 'pkg.Inner'})
    fields.append({'name': 'many', 'type': {'type': 'array', 'items': 'Inner'}})
    fields.append({'name': 'lookup', 'type': {'type': 'map', 'values': ['null', 'Inner']}})
    fields.append({'name': 'next', 'type': ['null', 'Outer']})

    outer = {'type': 'record', 'name': 'Outer', 'namespace': 'pkg', 'fields': fields}
    assert schema.resolve(dumps(outer)) == 'pkg.Outer'


def test_malformed():

    bad = list()
    bad.append('')
    bad.append('{')
    bad.append('"ClassA"')
    bad.append('42')
    bad.append('[]')
    bad.append('{"name": "ClassA"}')
    bad.append('{"type": "struct", "name": "ClassA"}')
    bad.append('{"type": "record", "namespace": "pkg", "fields": []}')
    bad.append('{"type": "record", "name": "", "fields": []}')
    bad.append('{"type": "record", "name": "ClassA"}')
    bad.append('{"type": "record", "name": "Class-A", "fields": []}')
    bad.append('{"type": "record", "name": "ClassA", "namespace": "pk g", "fields": []}')
    bad.append('{"type": "record", "name": "ClassA", "namespace": 5, "fields": []}')
    bad.append('{"type": "enum", "name": "Color"}')
    bad.append('{"type": "fixed", "name": "Md5", "size": "16"}')
    bad.append('{"type": "array"}')
    bad.append('["null", "Undefined"]')

    # Everything nested inside a schema is checked too.

    bad.append('{"type": "record", "name": "A", "namespace": "pkg", "fields": [{"name": "x", "type": "nope"}]}')
    bad.append('{"type": "record", "name": "A", "namespace": "pkg", "fields": [1, 2]}')
    bad.append('{"type": "record", "name": "A", "fields": [{"name": "x"}]}')
    bad.append('{"type": "record", "name": "A", "fields": [{"name": "x", "type": "int"}, {"name": "x", "type": "int"}]}')
    bad.append('{"type": "array", "items": "nope"}')
    bad.append('{"type": "map", "values": {"type": "array", "items": "nope"}}')
    bad.append('{"type": "enum", "name": "E", "symbols": ["A", "A"]}')
    bad.append('{"type": "enum", "name": "E", "symbols": ["A", 1]}')
    bad.append('{"type": {"type": "record", "name": "B", "fields": []}}')
    bad.append('{"type": ["null", "string"]}')
    bad.append('["null", "null"]')
    bad.append('["null", ["string"]]')
    bad.append('{"type": "fixed", "name": "Md5", "size": -1}')
    bad.append('{"type": "record", "name": "string", "fields": []}')

    twice = {'type': 'record', 'name': 'A', 'fields': [
        {'name': 'first', 'type': {'type': 'enum', 'name': 'E', 'symbols': ['X']}},
        {'name': 'second', 'type': {'type': 'enum', 'name': 'E', 'symbols': ['Y']}}]}
    bad.append(dumps(twice))

    for text in bad:
        with pytest.raises(SchemaParseError):
            schema.resolve(text)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
