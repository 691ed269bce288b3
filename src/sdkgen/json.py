''' Wrapper module around msgspec to handle the equivalent of
    :func:`json.loads` and :func:`json.dumps`.
'''

import msgspec


# The msgspec 'encode' operation returns bytes. Anything in sdkgen that
# serializes JSON goes through this module so that every caller sees bytes.

encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode

DecodeError = msgspec.DecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
