""" Resolve payload type schemas into fully-qualified type names. Schemas
    follow the Avro JSON conventions: a primitive type name, a type object,
    or a list describing a union. The whole schema is checked, including
    nested field, item and value types; names may only refer to primitives
    or to named types defined earlier in the same schema.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional, Union

from .. import json
from ..errors import SchemaParseError


primitives = frozenset(('null', 'boolean', 'int', 'long', 'float', 'double', 'bytes', 'string'))
named = frozenset(('record', 'error', 'enum', 'fixed'))
containers = frozenset(('array', 'map'))

_name = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def resolve(schema: Optional[Union[str, bytes]]) -> Optional[str]:
    """ Return the fully-qualified type name described by *schema*, or None
        if there is no schema. A malformed schema raises
        :class:`SchemaParseError`.
    """

    if schema is None:
        return None

    if isinstance(schema, str):
        schema = schema.encode()

    try:
        parsed = json.loads(schema)
    except json.DecodeError as e:
        raise SchemaParseError('schema is not valid JSON: ' + str(e)) from e

    return full_name(parsed)


def full_name(parsed: Any) -> str:
    """ Return the fully-qualified name of an already decoded schema.
    """

    return _Parser().parse(parsed, None)


class _Parser:
    """ One pass over a decoded schema. Named types are recorded as they are
        defined so that later references to them can be checked.
    """

    def __init__(self):
        self.defined: Dict[str, str] = dict()


    def parse(self, schema, namespace):

        if isinstance(schema, str):
            return self.reference(schema, namespace)

        if isinstance(schema, list):
            return self.union(schema, namespace)

        if not isinstance(schema, dict):
            raise SchemaParseError('unexpected schema: ' + repr(schema))

        try:
            type = schema['type']
        except KeyError:
            raise SchemaParseError("schema has no 'type'")

        if not isinstance(type, str):
            raise SchemaParseError('no type: ' + repr(type))

        if type in primitives:
            return type

        if type == 'array':
            if 'items' not in schema:
                raise SchemaParseError("array schema has no 'items'")
            self.parse(schema['items'], namespace)
            return type

        if type == 'map':
            if 'values' not in schema:
                raise SchemaParseError("map schema has no 'values'")
            self.parse(schema['values'], namespace)
            return type

        if type in named:
            return self.define(type, schema, namespace)

        # {"type": "pkg.ClassA"} refers to a type defined earlier.
        return self.reference(type, namespace)


    def reference(self, name, namespace):

        if name in primitives:
            return name

        if '.' not in name and namespace:
            qualified = namespace + '.' + name
            if qualified in self.defined:
                return qualified

        if name in self.defined:
            return name

        raise SchemaParseError('undefined type name: ' + repr(name))


    def union(self, branches, namespace):

        if len(branches) == 0:
            raise SchemaParseError('a union must list at least one type')

        seen = set()

        for branch in branches:
            if isinstance(branch, list):
                raise SchemaParseError('unions may not immediately contain other unions')

            resolved = self.parse(branch, namespace)

            if resolved in seen:
                raise SchemaParseError('duplicate type in union: ' + repr(resolved))
            seen.add(resolved)

        return 'union'


    def define(self, type, schema, namespace):

        name = schema.get('name')
        if not isinstance(name, str) or name == '':
            raise SchemaParseError('%s schema has no name' % (type))

        declared = schema.get('namespace')
        if declared is not None and not isinstance(declared, str):
            raise SchemaParseError('invalid namespace: ' + repr(declared))

        if declared is not None:
            namespace = declared

        if '.' in name or not namespace:
            fqn = name
        else:
            fqn = namespace + '.' + name

        for part in fqn.split('.'):
            if _name.fullmatch(part) is None:
                raise SchemaParseError('invalid type name: ' + repr(fqn))

        if fqn in primitives:
            raise SchemaParseError('cannot redefine primitive type: ' + repr(fqn))

        if fqn in self.defined:
            raise SchemaParseError('type defined twice: ' + repr(fqn))

        # Registered before the fields are checked, records may refer to
        # themselves.
        self.defined[fqn] = type

        inner = fqn.rpartition('.')[0] or None

        if type in ('record', 'error'):
            self.fields(type, schema.get('fields'), inner)

        elif type == 'enum':
            self.symbols(schema.get('symbols'))

        elif type == 'fixed':
            size = schema.get('size')
            if isinstance(size, bool) or not isinstance(size, int) or size < 0:
                raise SchemaParseError("fixed schema has no valid 'size'")

        return fqn


    def fields(self, type, fields, namespace):

        if not isinstance(fields, list):
            raise SchemaParseError("%s schema has no 'fields' list" % (type))

        seen = set()

        for field in fields:
            if not isinstance(field, dict):
                raise SchemaParseError('field is not an object: ' + repr(field))

            name = field.get('name')
            if not isinstance(name, str) or _name.fullmatch(name) is None:
                raise SchemaParseError('invalid field name: ' + repr(name))

            if name in seen:
                raise SchemaParseError('duplicate field name: ' + repr(name))
            seen.add(name)

            if 'type' not in field:
                raise SchemaParseError('field %s has no type' % (name))

            self.parse(field['type'], namespace)


    def symbols(self, symbols):

        if not isinstance(symbols, list):
            raise SchemaParseError("enum schema has no 'symbols' list")

        seen = set()

        for symbol in symbols:
            if not isinstance(symbol, str) or _name.fullmatch(symbol) is None:
                raise SchemaParseError('invalid enum symbol: ' + repr(symbol))

            if symbol in seen:
                raise SchemaParseError('duplicate enum symbol: ' + repr(symbol))
            seen.add(symbol)


# end of class _Parser


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
