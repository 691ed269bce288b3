""" Runtime configuration for sdkgen. Every setting has a built-in default
    that can be overridden with an environment variable; explicit arguments
    to :class:`sdkgen.generator.assembler.Assembler` override both.
"""

import enum
import os


class Policy(enum.Enum):
    """ How the assembler reacts to a per-item error. Template and registry
        errors are always fatal regardless of the policy.
    """

    FAIL_FAST = 'fail-fast'
    BEST_EFFORT = 'best-effort'


def templates(default=None):
    """ Return the directory location where templates are loaded from. This
        defaults to the ``templates`` directory bundled with this package, but
        can be overridden by calling this method with a valid path, or by
        setting the ``SDKGEN_TEMPLATES`` environment variable.
    """

    if default is not None:
        default = str(default)
        default = os.path.expandvars(default)

        if os.path.isdir(default):
            pass
        else:
            raise ValueError('not a template directory: ' + repr(default))

        return default

    try:
        found = os.environ['SDKGEN_TEMPLATES']
    except KeyError:
        pass
    else:
        if found:
            return os.path.expandvars(found)

    here = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(here, 'templates')


def extension(default=None):
    """ Return the file extension, without a leading dot, used for every
        generated source file. Defaults to ``java``; the ``SDKGEN_EXTENSION``
        environment variable overrides the default.
    """

    if default is None:
        default = os.environ.get('SDKGEN_EXTENSION', 'java')

    default = str(default).lstrip('.')

    if default == '':
        raise ValueError('the generated file extension cannot be empty')

    return default


def policy(default=None):
    """ Return the :class:`Policy` to apply to per-item errors. Accepts a
        :class:`Policy` instance or its string value; the ``SDKGEN_POLICY``
        environment variable is consulted if no *default* is given.
    """

    if default is None:
        default = os.environ.get('SDKGEN_POLICY', Policy.FAIL_FAST.value)

    if isinstance(default, Policy):
        return default

    try:
        return Policy(str(default).lower())
    except ValueError:
        raise ValueError('unknown error policy: ' + repr(default))


def workers(default=None):
    """ Return the number of worker threads used to decode items. Zero, the
        default, means everything runs in the calling thread. The
        ``SDKGEN_WORKERS`` environment variable overrides the default.
    """

    if default is None:
        default = os.environ.get('SDKGEN_WORKERS', 0)

    count = int(default)

    if count < 0:
        raise ValueError('the worker count cannot be negative')

    return count


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
