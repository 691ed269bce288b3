""" Signatures for request-style calls. The result of a call is delivered
    asynchronously, so every generated method returns a future; calls
    without an output type return a future of ``Void``.
"""

from __future__ import annotations

from typing import Optional

from .base import Signature, SignatureGenerator, format_signature


NULL_PARAM_TYPE = ''
NULL_RETURN_TYPE = 'Future<Void>'

NON_NULL_PARAM_TYPE = '%s param'
NON_NULL_RETURN_TYPE = 'Future<%s>'


class CallSignatureGenerator(SignatureGenerator):
    """ Generates signatures for the *sendMsg* family of contract items.
        Generation has no side effects and produces no side files.
    """

    def generate(self, name: str, input_type: Optional[str], output_type: Optional[str]) -> Signature:

        if input_type is None:
            param_type = NULL_PARAM_TYPE
        else:
            param_type = NON_NULL_PARAM_TYPE % (input_type)

        if output_type is None:
            return_type = NULL_RETURN_TYPE
        else:
            return_type = NON_NULL_RETURN_TYPE % (output_type)

        return Signature(format_signature(return_type, name, param_type))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
