""" Data structures describing a contract catalog, and the files generated
    from it. Everything here except :class:`ContractInstance` is immutable
    once constructed.
"""

from __future__ import annotations

import enum
from typing import Dict, Iterable, List, Optional, Tuple

import msgspec


class ContractItemCategory(enum.Enum):
    """ The generation strategy a contract item belongs to. Request-style
        calls become methods returning a future; listener registrations
        become setter methods accepting a generated listener type.
    """

    CALL = 'call'
    LISTENER_REGISTRATION = 'listener-registration'


class ContractItemDefinition(msgspec.Struct, frozen=True):
    """ A named group of contract items sharing one category, for example
        the *sendMsg* definition of the messaging contract.
    """

    name: str
    category: ContractItemCategory


class ContractItemInfo(msgspec.Struct, frozen=True):
    """ One declared method: the encoded method descriptor, plus optional
        schema text for the input and output payload types.
    """

    data: bytes
    in_schema: Optional[str] = None
    out_schema: Optional[str] = None


class ResolvedMethod(msgspec.Struct, frozen=True):
    """ A contract item after its descriptor has been decoded and its
        schemas resolved into fully-qualified type names.
    """

    name: str
    input_type: Optional[str] = None
    output_type: Optional[str] = None


class GeneratedFile(msgspec.Struct, frozen=True):
    file_name: str
    content: bytes


class ContractInstance:
    """ A contract declared by the host: an ordered list of item definitions,
        and for each definition, the ordered list of declared items. Items
        are appended with :func:`add`; the order they are added in is the
        order they are generated in.
    """

    def __init__(self, name: str, definitions: Iterable[ContractItemDefinition]):

        self.name = name
        self.definitions: Tuple[ContractItemDefinition, ...] = tuple(definitions)
        self._items: Dict[ContractItemDefinition, List[ContractItemInfo]] = dict()

        for definition in self.definitions:
            if definition in self._items:
                raise ValueError('duplicate item definition: ' + repr(definition.name))
            self._items[definition] = list()


    def __repr__(self):
        return 'ContractInstance(%r, %d definitions)' % (self.name, len(self.definitions))


    def add(self, definition: ContractItemDefinition, info: ContractItemInfo) -> ContractItemInfo:
        """ Append *info* to the items declared for *definition*. The
            definition must be one this contract was constructed with.
        """

        try:
            items = self._items[definition]
        except KeyError:
            raise ValueError("contract %r has no definition %r" % (self.name, definition.name))

        items.append(info)
        return info


    def items(self, definition: ContractItemDefinition) -> Tuple[ContractItemInfo, ...]:
        return tuple(self._items[definition])


class GenerationRequest:
    """ Everything needed for one generation run: the contracts, in the
        order they should be generated, the message family identifier, and
        the extension id used to keep the generated namespace unique.
    """

    def __init__(self, contracts: Iterable[ContractInstance], family: str, extension_id: int):

        if isinstance(extension_id, bool) or not isinstance(extension_id, int):
            raise ValueError('the extension id must be an integer')

        if extension_id < 0:
            raise ValueError('the extension id cannot be negative')

        if not family:
            raise ValueError('the message family identifier must be specified')

        self.contracts: Tuple[ContractInstance, ...] = tuple(contracts)
        self.family = family
        self.extension_id = extension_id


    def __repr__(self):
        return 'GenerationRequest(%r, %d, %d contracts)' % (self.family, self.extension_id, len(self.contracts))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
