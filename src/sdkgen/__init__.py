""" Python implementation of sdkgen, the messaging SDK API generator. Given
    a catalog of contract items it generates the client-side API interface
    and the listener types that interface refers to.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Utility components.

from . import json
from . import config
from . import errors
from . import template

# Submodules used by multiple other components.

from . import contract
from . import codec

# Primary public-facing interfaces.

from . import generator
generate = generator.generate

from .contract import ContractInstance, ContractItemCategory, ContractItemDefinition
from .contract import ContractItemInfo, GeneratedFile, GenerationRequest
from .generator import Assembler

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
