# -*- coding: utf-8 -*-
"""
    formkit.settings
    ~~~~~~~~~~~~~~~~

    This module just stores the formkit settings.  The defaults live in
    `default_settings.cfg` next to this file, an additional settings file
    can be pointed to with the `FORMKIT_SETTINGS_FILE` environment variable.
    Only the settings known from the defaults can be changed.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import os

#: i18n support, leave in place for custom settings files
from formkit.i18n import lazy_gettext as _


_defaults_file = os.path.join(os.path.dirname(__file__),
                              'default_settings.cfg')
_error_render_positions = ('top_outside', 'top_inside', 'bottom_inside',
                           'bottom_outside')


def _read_file(filename):
    """Executes a settings file and returns the settings it defines."""
    ns = {'_': _}
    with open(filename) as f:
        exec(compile(f.read(), filename, 'exec'), ns)
    return dict((key, value) for key, value in ns.items()
                if key.isupper() and not key.startswith('_'))


def _check(key, value):
    if key not in _defaults:
        raise TypeError('unknown setting %r' % key)
    if key == 'ERROR_RENDER_POSITION' and \
       value not in _error_render_positions:
        raise ValueError('error render position must be one of %s' %
                         ', '.join(_error_render_positions))


def configure(**values):
    """Configuration shortcut.  Nothing is changed if one of the values
    is rejected.
    """
    for key, value in values.items():
        _check(key, value)
    globals().update(values)


def configure_from_file(filename):
    """Configures from a file.  Lower case names in the file are helpers
    and ignored.
    """
    configure(**_read_file(filename))


def revert_to_default():
    """Reverts the settings to the defaults."""
    globals().update(_defaults)


def autodiscover_settings():
    """Finds settings in the environment."""
    filename = os.environ.get('FORMKIT_SETTINGS_FILE')
    if filename:
        configure_from_file(filename)


_defaults = _read_file(_defaults_file)
revert_to_default()
autodiscover_settings()
