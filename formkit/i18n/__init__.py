# -*- coding: utf-8 -*-
"""
    formkit.i18n
    ~~~~~~~~~~~~

    This module implements the internationalization support that is used to
    translate the built-in messages of the toolkit (validator messages and
    the generic error fallback).  It's implemented as a package so that the
    translations can be stored as package data.

    The settings depend on this module.  That means at import time it must
    not import anything from formkit besides modules that don't import the
    settings themselves.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import os

from babel import Locale, UnknownLocaleError
from babel.support import LazyProxy, NullTranslations, Translations

# these imports are designed to be safe to import from this point
from formkit.utils.ctxlocal import local

__all__ = ['_', 'gettext', 'ngettext', 'lazy_gettext', 'is_lazy_string']


LOCALE_DOMAIN = 'messages'
LOCALE_PATH = os.path.dirname(__file__)


_translations = {}


def get_translations():
    """Get the active translations.  These are the translations bound to
    the current context or the ones of the default language.
    """
    rv = getattr(local, 'translations', None)
    if rv is not None:
        return rv
    from formkit import settings
    try:
        return load_translations(settings.DEFAULT_LANGUAGE)
    except (ValueError, UnknownLocaleError):
        return None


def set_locale(locale):
    """Binds the translations for the locale to the current context."""
    local.translations = load_translations(locale)


def load_translations(locale):
    """Return the translations for the locale."""
    locale = Locale.parse(locale)
    key = str(locale)
    rv = _translations.get(key)
    if rv is None:
        catalog = find_catalog(locale)
        if catalog is None:
            rv = NullTranslations()
        else:
            with open(catalog, 'rb') as f:
                rv = Translations(fp=f, domain=LOCALE_DOMAIN)
        _translations[key] = rv
    return rv


def find_catalog(locale):
    """Finds the catalog for the given locale on the path.  Returns the
    filename of the .mo file if found, otherwise `None` is returned.
    """
    catalog = os.path.join(*[LOCALE_PATH, str(Locale.parse(locale)),
                             'LC_MESSAGES', LOCALE_DOMAIN + '.mo'])
    if os.path.isfile(catalog):
        return catalog


def gettext(string):
    """Translate a given string to the active language."""
    translations = get_translations()
    if translations is None:
        return str(string)
    return translations.gettext(string)


def ngettext(singular, plural, n):
    """Translate the possible pluralized string to the active language."""
    translations = get_translations()
    if translations is None:
        if n == 1:
            return str(singular)
        return str(plural)
    return translations.ngettext(singular, plural, n)


def is_lazy_string(obj):
    """Checks if the given object is a lazy string."""
    return isinstance(obj, LazyProxy)


def lazy_gettext(string):
    """A lazy version of `gettext`.  The string is translated every time
    it's used, so messages created at import time follow the locale bound
    to the context when they are rendered:

    >>> msg = lazy_gettext(u'Hello %s')
    >>> msg % u'World'
    'Hello World'
    >>> is_lazy_string(msg), is_lazy_string(u'Hello')
    (True, False)
    """
    if is_lazy_string(string):
        return string
    return LazyProxy(gettext, string, enable_cache=False)


_ = gettext
