""" Codecs for the two opaque inputs carried by each contract item: the
    encoded method descriptor, and the payload type schemas.
"""

from . import descriptor
from . import schema


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
