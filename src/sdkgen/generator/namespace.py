""" Naming rules for generated sources: the package every generated file
    is placed in, and the name of the generated API type.
"""

PACKAGE_NAME = '%s.ext%d'
API_CLASS_NAME = '%sPluginAPI'

# The API type name is built from a fixed family label.

default_label = 'Messaging'


def resolve(family, extension_id):
    """ Return the namespace for generated sources. The *extension_id* keeps
        sources generated for different extensions of the same message
        *family* apart; for example, family ``org.example.Family`` with
        extension id 1 resolves to ``org.example.Family.ext1``.
    """

    if not family:
        raise ValueError('the message family identifier must be specified')

    extension_id = int(extension_id)

    if extension_id < 0:
        raise ValueError('the extension id cannot be negative')

    return PACKAGE_NAME % (family, extension_id)


def api_type_name(label=None):

    if label is None:
        label = default_label

    return API_CLASS_NAME % (label)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
