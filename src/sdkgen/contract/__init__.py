"""
Contract Layer
==============

Describes what the host declares and what the generator produces. Nothing
here knows how signatures are generated.

---------------------------------------------------------------------

Layer Overview
--------------

Contract Factory (factory.py)
    Ready-made messaging contract definitions
    - send_msg_def()
    - receive_msg_def()
    - messaging_contract()
    - request()

    │
    ▼
Item Builder (builder.py)
    Fluent construction of contract items
    - Encodes the method descriptor
    - Serializes schema dictionaries

    │
    ▼
Contract Model (model.py)
    Immutable catalog and output structures
    - ContractItemCategory
    - ContractItemDefinition / ContractItemInfo
    - ContractInstance
    - GenerationRequest / GeneratedFile

---------------------------------------------------------------------
"""

from . import model
from . import builder
from . import factory

from .model import ContractInstance, ContractItemCategory, ContractItemDefinition
from .model import ContractItemInfo, GeneratedFile, GenerationRequest, ResolvedMethod


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
