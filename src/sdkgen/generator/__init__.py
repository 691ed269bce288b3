""" Signature generation. One :class:`SignatureGenerator` exists for every
    contract item category; the :class:`Assembler` ties them together into
    a complete generation run.
"""

from . import base
from . import call
from . import listener
from . import namespace
from . import registry
from . import assembler

from .assembler import Assembler, Phase, generate
from .base import Signature, SignatureGenerator
from .call import CallSignatureGenerator
from .listener import ListenerSignatureGenerator
from .registry import Registry


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
