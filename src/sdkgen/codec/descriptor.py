""" Encoding and decoding of method descriptors. A descriptor is the opaque
    configuration blob attached to each contract item; once decoded it
    yields the name of the generated method.
"""

from __future__ import annotations

from typing import Annotated

import msgspec

from .. import json
from ..errors import DescriptorDecodeError


# Method names end up verbatim in generated source, and are also used to
# name listener types and their files.

Identifier = Annotated[str, msgspec.Meta(pattern=r'^[A-Za-z_$][A-Za-z0-9_$]*\Z')]


class MethodDescriptor(msgspec.Struct, frozen=True, rename={'name': 'methodName'}):
    name: Identifier


_decoder = msgspec.json.Decoder(MethodDescriptor)


def encode(name: str) -> bytes:
    """ Return the encoded descriptor for a method called *name*. This is
        the inverse of :func:`decode`.
    """

    try:
        descriptor = msgspec.convert({'methodName': name}, MethodDescriptor)
    except msgspec.ValidationError as e:
        raise ValueError('invalid method name %r: %s' % (name, e))

    return json.dumps(descriptor)


def decode(data: bytes) -> MethodDescriptor:
    """ Decode the descriptor *data* into a :class:`MethodDescriptor`. Any
        failure is raised as a :class:`DescriptorDecodeError`.
    """

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DescriptorDecodeError('method descriptor must be bytes, not ' + type(data).__name__)

    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as e:
        raise DescriptorDecodeError('cannot decode method descriptor: ' + str(e)) from e


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
