""" Fluent construction of contract items."""

from __future__ import annotations

from typing import Any, Optional

from .. import json
from ..codec import descriptor
from .model import ContractItemInfo


def _schema_text(schema: Any) -> Optional[str]:

    if schema is None or isinstance(schema, str):
        return schema

    if isinstance(schema, bytes):
        return schema.decode('utf-8')

    # Anything else is taken to be a decoded schema, such as a dictionary.
    return json.dumps(schema).decode('utf-8')


class ItemInfoBuilder:

    def __init__(self):
        self._data: Optional[bytes] = None
        self._in: Optional[str] = None
        self._out: Optional[str] = None

    # Descriptor
    def method(self, name: str):
        self._data = descriptor.encode(name)
        return self

    def data(self, blob: bytes):
        self._data = blob
        return self

    # Payload types
    def in_schema(self, schema: Any):
        self._in = _schema_text(schema)
        return self

    def out_schema(self, schema: Any):
        self._out = _schema_text(schema)
        return self

    # Finalize
    def build(self) -> ContractItemInfo:

        if self._data is None:
            raise ValueError('method descriptor not specified')

        return ContractItemInfo(self._data, self._in, self._out)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
