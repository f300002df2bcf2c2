# -*- coding: utf-8 -*-
"""
    formkit.handler
    ~~~~~~~~~~~~~~~

    The request handler pulls the submitted values out of a Werkzeug request
    and buffers values and errors.  Both can be parked in the session to
    survive a redirect:

        handler = RequestHandler(request)
        if handler.is_request():
            validator = Validator(handler.get_request())
            ...
            handler.set_errors(validator.get_errors())
            handler.set_session_data()
            return redirect(request.url)
        handler.get_session_data()
        form = Form(values=handler.get_values(),
                    errors=handler.get_errors())

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import re

from markupsafe import escape
from werkzeug.datastructures import MultiDict

from formkit import settings
from formkit.fields import _force_dict, _to_list
from formkit.utils.ctxlocal import LocalProperty
from formkit.utils.log import get_logger


logger = get_logger(__name__)

_slash_escape_re = re.compile(r'\\(.)', re.DOTALL)


def _decode(data):
    """Decodes submitted data into a dict.  Keys ending with ``[]`` are
    collected into lists under the bare name, other keys keep their first
    value:

    >>> _decode(MultiDict([('color[]', 'red'), ('color[]', 'blue'),
    ...                    ('name', 'john')])) == \\
    ...     {'color': ['red', 'blue'], 'name': 'john'}
    True
    >>> _decode({'tags[]': 'a'})
    {'tags': ['a']}
    """
    if isinstance(data, MultiDict):
        listiter = data.lists()
    else:
        listiter = ((k, _to_list(v)) for k, v in _force_dict(data).items())

    result = {}
    for key, values in listiter:
        if key.endswith('[]'):
            result.setdefault(key[:-2], []).extend(values)
        elif values:
            result[key] = values[0]
    return result


def _strip_slashes(value):
    """Removes backslash escapes.

    >>> print(_strip_slashes(u"O\\\\'Reilly"))
    O'Reilly
    """
    return _slash_escape_re.sub(r'\1', value)


class RequestHandler(object):
    """Buffers the values and errors of a form submission.  If no request
    is given the request bound to the context local is used.  The session
    is the mapping passed or the `session` of the request.
    """

    #: the request bound to the context local
    bound_request = LocalProperty('request')

    def __init__(self, request=None, session=None):
        self._request = request
        self._session = session
        self.values = {}
        self.errors = {}

    @property
    def request(self):
        """The request the handler reads from or `None`."""
        if self._request is not None:
            return self._request
        return self.bound_request

    @property
    def session(self):
        """The session store or `None`."""
        if self._session is not None:
            return self._session
        return getattr(self.request, 'session', None)

    def _source(self, method):
        request = self.request
        if request is None:
            return None
        method = method.lower()
        if method == 'post':
            return request.form
        elif method == 'get':
            return request.args

    def is_request(self, method='post'):
        """True if values were submitted with the given method."""
        return bool(self._source(method))

    def get_request(self, method='post'):
        """Reads the values submitted with the given method (``'post'`` or
        ``'get'``), stores and returns them.
        """
        values = _decode(self._source(method))
        self.set_values(values)
        return values

    def get_session_data(self):
        """Restores values and errors stored by :meth:`set_session_data`
        and removes them from the session.  Does nothing if there is no
        session or nothing was stored.
        """
        session = self.session
        if session is None:
            return
        values_key = settings.SESSION_VALUES_KEY
        errors_key = settings.SESSION_ERRORS_KEY
        if values_key in session and errors_key in session:
            self.set_values(session.pop(values_key))
            self.set_errors(session.pop(errors_key))
            logger.debug('form data restored from session',
                         fields=len(self.values), failed_fields=len(self.errors))

    def set_session_data(self):
        """Stores the values and errors in the session."""
        session = self.session
        if session is None:
            raise RuntimeError('no session available to store the form '
                               'data in')
        session[settings.SESSION_VALUES_KEY] = dict(self.values)
        session[settings.SESSION_ERRORS_KEY] = dict(
            (key, [str(msg) for msg in _to_list(messages)])
            for key, messages in self.errors.items())
        logger.debug('form data stored in session', fields=len(self.values),
                     failed_fields=len(self.errors))

    def set_values(self, values=None):
        """Replaces the values.  Anything but a dict is ignored."""
        if isinstance(values, dict):
            self.values = values

    def set_value(self, field_name, value=u''):
        """Sets the value of a field."""
        self.values[field_name] = value

    def get_values(self):
        """Returns the values."""
        return self.values

    def get_field_value(self, field_name):
        """Returns the value of a field or `None`."""
        return self.values.get(field_name)

    def get_field_value_clean(self, field_name):
        """Returns the value of a field safe for redisplay.  Strings are
        unescaped and HTML escaped, other values are returned unchanged.
        """
        value = self.get_field_value(field_name)
        if isinstance(value, str):
            return escape(_strip_slashes(value))
        return value

    def set_errors(self, errors=None):
        """Replaces the errors.  Anything but a dict is ignored."""
        if isinstance(errors, dict):
            self.errors = errors

    def add_error(self, field_name, message=u''):
        """Adds an error message for a field."""
        self.errors.setdefault(field_name, []).append(message)

    def get_errors(self):
        """Returns the errors."""
        return self.errors

    def get_field_errors(self, field_name):
        """Returns the errors of a field."""
        return self.errors.get(field_name, [])

    def has_errors(self):
        """True if there are errors."""
        return bool(self.errors)
