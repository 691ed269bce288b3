""" Loading and rendering of source templates. A template is plain text with
    ``${name}`` markers; only the names in :data:`placeholders` are allowed.
    Template text is cached for the life of the process, keyed by directory
    and template name.
"""

import logging
import os
import re
import threading

from . import config
from .errors import TemplateLoadError


logger = logging.getLogger(__name__)

NAMESPACE = 'namespace'
TYPE_NAME = 'type_name'
PARAM_TYPE = 'param_type'
RETURN_TYPE = 'return_type'
METHOD_SIGNATURES = 'method_signatures'

placeholders = frozenset((NAMESPACE, TYPE_NAME, PARAM_TYPE, RETURN_TYPE, METHOD_SIGNATURES))

API = 'api.template'
LISTENER = 'listener.template'

_marker = re.compile(r'\$\{([^}]*)\}')

_cache = dict()
_cache_lock = threading.Lock()


class Template:
    """ A loaded template. The set of placeholders it uses is established
        when it is loaded; every one of them must be supplied to
        :func:`render`.
    """

    def __init__(self, name, text):

        self.name = name
        self.text = text

        found = set()
        for match in _marker.finditer(text):
            found.add(match.group(1))

        unknown = found - placeholders
        if unknown:
            unknown = ', '.join(sorted(unknown))
            raise TemplateLoadError('template %s uses unknown placeholders: %s' % (name, unknown))

        self.required = frozenset(found)


    def __repr__(self):
        return 'Template(%r)' % (self.name)


    def render(self, **values):
        """ Substitute the supplied *values* into the template and return the
            result as UTF-8 bytes. Values for placeholders the template does
            not use are ignored; a placeholder without a value is an error.
            Substituted text is never itself scanned for markers.
        """

        missing = self.required - set(values)
        if missing:
            missing = ', '.join(sorted(missing))
            raise TemplateLoadError('no value supplied for %s in template %s' % (missing, self.name))

        def substitute(match):
            return str(values[match.group(1)])

        content = _marker.sub(substitute, self.text)
        return content.encode('utf-8')


# end of class Template



def load(name, directory=None):
    """ Return the :class:`Template` called *name*, found in *directory* or
        the configured template directory. Missing or unreadable templates
        raise :class:`TemplateLoadError`.
    """

    if directory is None:
        directory = config.templates()

    key = (directory, name)

    with _cache_lock:
        try:
            return _cache[key]
        except KeyError:
            pass

    filename = os.path.join(directory, name)

    try:
        with open(filename, 'r', encoding='utf-8') as reader:
            text = reader.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError('cannot read template %s: %s' % (filename, e)) from e

    template = Template(name, text)
    logger.debug('loaded template %s', filename)

    with _cache_lock:
        template = _cache.setdefault(key, template)

    return template


def clear():
    """ Discard every cached template. The next :func:`load` reads from disk.
    """

    with _cache_lock:
        _cache.clear()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
