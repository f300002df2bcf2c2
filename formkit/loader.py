# -*- coding: utf-8 -*-
"""
    formkit.loader
    ~~~~~~~~~~~~~~

    Resolves import strings for the field type registry and the rule
    registry.  Failures are not raised but returned as :class:`LoadError`
    values so that registrations from configuration files can't take down
    the hosting application.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from werkzeug.utils import import_string

from formkit.utils.log import get_logger


logger = get_logger(__name__)


class LoadError(object):
    """Returned instead of an object if something could not be loaded.
    Load errors are always false in a boolean context.
    """

    def __init__(self, message, import_name=None):
        self.message = message
        self.import_name = import_name

    def __bool__(self):
        return False

    def __str__(self):
        return self.message

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self.message)


def is_load_error(obj):
    """Checks if the given object is a load error."""
    return isinstance(obj, LoadError)


def load_class(import_name, base=None):
    """Imports an object based on a string (``package.module:Name`` or
    ``package.module.Name``).  If `base` is given the object must be a
    subclass of it.
    """
    obj = import_string(import_name, silent=True)
    if obj is None:
        logger.warning('import failed', import_name=import_name)
        return LoadError(u'Failed to load class: %s' % import_name,
                         import_name)
    if base is not None and not (isinstance(obj, type) and
                                 issubclass(obj, base)):
        logger.warning('import is not a subclass', import_name=import_name,
                       base=base.__name__)
        return LoadError(u'Class: %s must be a subclass of %s' %
                         (import_name, base.__name__), import_name)
    return obj
