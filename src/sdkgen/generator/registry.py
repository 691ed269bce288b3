""" Mapping from contract item category to signature generator. A registry
    is built fresh for every generation run; generators may carry run state
    such as the namespace, and must never leak from one run into another.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..contract.model import ContractItemCategory
from ..errors import UnregisteredCategoryError
from .base import SignatureGenerator
from .call import CallSignatureGenerator
from .listener import ListenerSignatureGenerator


class Registry:

    def __init__(self):
        self._generators: Dict[ContractItemCategory, SignatureGenerator] = dict()


    def __contains__(self, category):
        return category in self._generators


    def __len__(self):
        return len(self._generators)


    def register(self, category: ContractItemCategory, generator: SignatureGenerator) -> None:

        if not isinstance(category, ContractItemCategory):
            raise TypeError('not a contract item category: ' + repr(category))

        if category in self._generators:
            raise ValueError('a generator is already registered for ' + category.value)

        self._generators[category] = generator


    def lookup(self, category: ContractItemCategory) -> SignatureGenerator:

        try:
            return self._generators[category]
        except KeyError:
            raise UnregisteredCategoryError('no signature generator registered for ' + repr(category))


def default(namespace: str, extension: Optional[str] = None, directory: Optional[str] = None) -> Registry:
    """ Return a new :class:`Registry` with a generator registered for every
        :class:`ContractItemCategory`.
    """

    registry = Registry()
    registry.register(ContractItemCategory.CALL, CallSignatureGenerator())
    registry.register(ContractItemCategory.LISTENER_REGISTRATION,
                      ListenerSignatureGenerator(namespace, extension, directory))

    return registry


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
