""" Signature generator interface.

This is the (small) contract every per-category strategy follows. The
assembler only ever talks to generators through it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

import msgspec

from ..contract.model import GeneratedFile


# Format for every generated method signature: return type, method name,
# and the parameter clause.

METHOD_SIGNATURE = '%s %s(%s)'


class Signature(msgspec.Struct, frozen=True):
    """ The outcome of generating one contract item: the method signature,
        without a statement terminator, and any side files produced along
        the way.
    """

    text: str
    side_files: Tuple[GeneratedFile, ...] = ()


class SignatureGenerator(ABC):
    """Turns one resolved contract item into a method signature."""

    @abstractmethod
    def generate(self, name: str, input_type: Optional[str], output_type: Optional[str]) -> Signature:
        """ Return the :class:`Signature` for a method called *name*. Either
            type may be None if the item does not declare it.
        """


def format_signature(return_type: str, name: str, param_type: str) -> str:
    return METHOD_SIGNATURE % (return_type, name, param_type)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
