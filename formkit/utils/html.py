# -*- coding: utf-8 -*-
"""
    formkit.utils.html
    ~~~~~~~~~~~~~~~~~~

    The string backend the fields and forms use to emit markup.  Everything
    in here returns :class:`markupsafe.Markup` objects so that the output
    can be passed on to a template engine without being escaped twice.

    >>> void_tag('input', {'type': 'text', 'name': 'q', 'class': None})
    Markup('<input type="text" name="q" />')
    >>> open_tag('label', {'for': 'f_q'}) + u'<Search>' + close_tag('label')
    Markup('<label for="f_q">&lt;Search&gt;</label>')

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import re
import sys

from markupsafe import Markup, escape


_class_split_re = re.compile(r'\s+')


def render_attributes(attributes):
    """Renders a mapping of attributes in insertion order.  Attributes with
    a value of `None` are omitted.
    """
    rv = []
    for key, value in attributes.items():
        if value is None:
            continue
        rv.append(u' %s="%s"' % (key, escape(value)))
    return Markup(u''.join(rv))


def open_tag(tag, attributes=None):
    """Returns an opening tag."""
    return Markup(u'<%s%s>') % (Markup(tag),
                                render_attributes(attributes or {}))


def close_tag(tag):
    """Returns a closing tag."""
    return Markup(u'</%s>' % tag)


def void_tag(tag, attributes=None):
    """Returns a tag without content like ``<input />``."""
    return Markup(u'<%s%s />') % (Markup(tag),
                                  render_attributes(attributes or {}))


def element(tag, content, attributes=None):
    """Returns a tag wrapping `content`.  Content that is not markup is
    escaped.
    """
    return open_tag(tag, attributes) + escape(content) + close_tag(tag)


def raw(value):
    """Marks a caller supplied string as markup.  `None` becomes the empty
    string.
    """
    if value is None:
        return Markup(u'')
    return Markup(value)


def split_classes(value):
    """Splits a class attribute string into tokens.

    >>> split_classes(u' foo  bar\\nbaz ')
    ['foo', 'bar', 'baz']
    """
    if not isinstance(value, str):
        return []
    return [x for x in _class_split_re.split(value) if x]


class ClassList(object):
    """An ordered set of CSS class tokens.

    >>> classes = ClassList(['a', 'b'])
    >>> classes.add('a')
    False
    >>> classes.add('c')
    True
    >>> classes.merge(['x', 'b'])
    >>> str(classes)
    'x b a c'
    """

    def __init__(self, tokens=None):
        self._tokens = []
        for token in tokens or ():
            self.add(token)

    def add(self, token):
        """Adds a token.  Returns `False` if the token was empty or known."""
        if not token or token in self._tokens:
            return False
        self._tokens.append(token)
        return True

    def remove(self, token):
        """Removes a token if it exists."""
        if token in self._tokens:
            self._tokens.remove(token)

    def merge(self, tokens):
        """Puts the given tokens in front of the tracked ones, dropping
        duplicates.
        """
        merged = []
        for token in list(tokens) + self._tokens:
            if token and token not in merged:
                merged.append(token)
        self._tokens = merged

    def __contains__(self, token):
        return token in self._tokens

    def __iter__(self):
        return iter(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __str__(self):
        return u' '.join(self._tokens)

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self._tokens)


def strip_class(value, token):
    """Removes a token from a class attribute string.  Returns `None` if
    no tokens are left.
    """
    tokens = [x for x in split_classes(value) if x != token]
    return u' '.join(tokens) or None


def write(markup, stream=None):
    """Writes markup to the stream or standard output and returns it."""
    if stream is None:
        stream = sys.stdout
    stream.write(str(markup))
    return markup
