"""Convenience constructors for contracts and generation requests."""

from __future__ import annotations

from typing import Any, Iterable

from .builder import ItemInfoBuilder
from .model import ContractInstance, ContractItemCategory, ContractItemDefinition
from .model import ContractItemInfo, GenerationRequest


SEND_MSG = 'sendMsg'
RECEIVE_MSG = 'receiveMsg'


def send_msg_def() -> ContractItemDefinition:
    """Request-style calls of the messaging contract."""
    return ContractItemDefinition(SEND_MSG, ContractItemCategory.CALL)


def receive_msg_def() -> ContractItemDefinition:
    """Listener registrations of the messaging contract."""
    return ContractItemDefinition(RECEIVE_MSG, ContractItemCategory.LISTENER_REGISTRATION)


def messaging_contract(name: str = 'messaging') -> ContractInstance:
    """ Return an empty messaging contract, declaring the *sendMsg* and
        *receiveMsg* item definitions in that order.
    """

    return ContractInstance(name, (send_msg_def(), receive_msg_def()))


def item_info(name: str, in_schema: Any = None, out_schema: Any = None) -> ContractItemInfo:
    return ItemInfoBuilder().method(name).in_schema(in_schema).out_schema(out_schema).build()


def request(contracts: Iterable[ContractInstance], family: str, extension_id: int = 0) -> GenerationRequest:

    if isinstance(contracts, ContractInstance):
        contracts = (contracts,)

    return GenerationRequest(contracts, family, extension_id)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
