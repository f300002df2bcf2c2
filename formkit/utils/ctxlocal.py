# -*- coding: utf-8 -*-
"""
    formkit.utils.ctxlocal
    ~~~~~~~~~~~~~~~~~~~~~~

    The context local that is used by the request handler and the i18n
    system.  Hosting applications bind the current request to it and clean
    it up at the end of the request by calling `local_mgr.cleanup()` or by
    wrapping their WSGI application with `local_mgr.make_middleware`.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from werkzeug.local import Local, LocalManager


local = Local()
local_mgr = LocalManager([local])


class LocalProperty(object):
    """Class/Instance property that returns something from the local."""

    def __init__(self, name):
        self.__name__ = name

    def __get__(self, obj, type=None):
        return getattr(local, self.__name__, None)


def bind_request(request):
    """Binds a request to the context local so that request handlers
    created without an explicit request pick it up.
    """
    local.request = request
