""" Signatures for push-style listener registrations. Each registration
    method accepts a generated listener type; the listener type itself is
    rendered from a template and returned as a side file.
"""

from __future__ import annotations

from typing import Optional

from .. import config
from .. import template
from ..contract.model import GeneratedFile
from .base import Signature, SignatureGenerator, format_signature


PARAM_TYPE = '%s_MethodListener listener'
RETURN_TYPE = 'void'

LISTENER_NULL_PARAM_TYPE = ''
LISTENER_NULL_RETURN_TYPE = 'void'

LISTENER_NON_NULL_PARAM_TYPE = '%s listener'
LISTENER_NON_NULL_RETURN_TYPE = '%s'

LISTENER_CLASS_NAME = '%s_MethodListener'


class ListenerSignatureGenerator(SignatureGenerator):
    """ Generates signatures for the *receiveMsg* family of contract items.

        Unlike the call generator this one is not a pure function of its
        arguments: each invocation reads the listener template, and the
        returned :class:`Signature` carries the rendered listener type as a
        side file. The input and output types describe the listener's
        callback, not the registration method.
    """

    def __init__(self, namespace: str, extension: Optional[str] = None, directory: Optional[str] = None):

        self.namespace = namespace
        self.extension = config.extension(extension)
        self.directory = directory


    def generate(self, name: str, input_type: Optional[str], output_type: Optional[str]) -> Signature:

        if input_type is None:
            listener_param_type = LISTENER_NULL_PARAM_TYPE
        else:
            listener_param_type = LISTENER_NON_NULL_PARAM_TYPE % (input_type)

        if output_type is None:
            listener_return_type = LISTENER_NULL_RETURN_TYPE
        else:
            listener_return_type = LISTENER_NON_NULL_RETURN_TYPE % (output_type)

        class_name = LISTENER_CLASS_NAME % (name)

        listener = template.load(template.LISTENER, self.directory)
        content = listener.render(namespace=self.namespace,
                                  type_name=class_name,
                                  param_type=listener_param_type,
                                  return_type=listener_return_type)

        side_file = GeneratedFile(class_name + '.' + self.extension, content)

        text = format_signature(RETURN_TYPE, name, PARAM_TYPE % (name))
        return Signature(text, (side_file,))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
