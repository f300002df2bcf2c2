# -*- coding: utf-8 -*-
"""
    formkit.form
    ~~~~~~~~~~~~

    Implements the form.  A form owns an ordered list of fields and raw HTML
    snippets, cascades the form wide field defaults, values and errors into
    the fields it creates and renders the ``<form>`` wrapper around them.

    >>> form = Form({'action': '/signup'}, {'render_is_submitted_field': False})
    >>> field = form.add_field('text', 'name', attributes={'id': 'f_name'})
    >>> form.add_html(u'<br>')
    >>> print(form.render())
    <form action="/signup" method="post"><input type="text" name="name" id="f_name" /><br></form>

    There are two render modes.  By default the whole form is rendered in one
    go by :meth:`Form.render`.  In progressive render mode the caller emits
    the parts itself, in the order `open`, fields and HTML, `close`.  The
    parts are written to the stream of the form (standard output by default)
    as they are rendered.  The form does not guard against calls in the
    wrong order.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from markupsafe import Markup

from formkit import settings
from formkit.fields import Field, variants as default_variants, _force_dict, \
     _merge, _to_list
from formkit.utils.html import ClassList, open_tag, close_tag, raw, \
     split_classes, strip_class, write


class Form(object):
    """A HTML form.

    `attributes` are the attributes of the ``<form>`` tag, `options` change
    the rendering (`render_tag`, `render_is_submitted_field`, `before`,
    `before_inner`, `after_inner` and `after`).  `values` and `errors` are
    dicts keyed by field name, usually coming from a
    :class:`~formkit.handler.RequestHandler` and a
    :class:`~formkit.validation.Validator`.

    `variants` is the field type registry used by :meth:`add_field` and
    `stream` the file-like object progressive rendering writes to.
    """

    default_attributes = {
        'accept':           None,
        'accept-charset':   None,
        'action':           u'',
        'autocomplete':     None,
        'enctype':          None,
        'method':           None,
        'name':             None,
        'novalidate':       None,
        'target':           None,
        'class':            None,
        'id':               None
    }

    default_options = {
        'render_tag':                   True,
        'render_is_submitted_field':    True,
        'before':                       u'',
        'before_inner':                 u'',
        'after_inner':                  u'',
        'after':                        u''
    }

    def __init__(self, attributes=None, options=None, values=None,
                 errors=None, variants=None, stream=None):
        defaults = dict(self.default_attributes,
                        method=settings.DEFAULT_FORM_METHOD)
        self.attributes = _merge(defaults, attributes)
        self.options = _merge(self.default_options, options)
        self.values = _force_dict(values)
        self.errors = _force_dict(errors)
        if variants is None:
            variants = default_variants
        self.variants = variants
        self.stream = stream
        self.classes = ClassList()
        self.fields = []
        self.field_attributes = {}
        self.field_options = {}
        self.field_wrapper_tag = None
        self.field_wrapper_attributes = {}
        self.render_errors = True
        self.render_tab_indexes = False
        self.last_tab_index = 0
        self._progressive_render = False
        self._written = set()
        self._is_submitted = False

        if self.options.get('render_is_submitted_field'):
            self.add_field('hidden', settings.SUBMITTED_MARKER, attributes={
                'value': settings.SUBMITTED_MARKER_VALUE
            })
            self._is_submitted = settings.SUBMITTED_MARKER in self.values

    def is_submitted(self):
        """True if the submitted marker was in the values the form was
        created with.
        """
        return self._is_submitted

    def disable_errors(self, disable=True):
        """Disables error output for the fields added afterwards."""
        self.render_errors = not disable

    def enable_tab_indexes(self, enable=True):
        """Enables rendering of tab indexes.  The fields claim their indexes
        from the form when they are rendered.
        """
        self.render_tab_indexes = enable

    def tab_indexes_enabled(self):
        """True if tab indexes are rendered."""
        return self.render_tab_indexes

    def get_last_tab_index(self):
        """Returns the last claimed tab index."""
        return self.last_tab_index

    def set_last_tab_index(self, index=1):
        """Sets the last claimed tab index."""
        self.last_tab_index = index

    def set_attribute(self, name, value=None):
        """Sets an attribute of the form tag."""
        self.attributes[name] = value

    def set_option(self, name, value=None):
        """Sets an option of the form."""
        self.options[name] = value

    def set_attributes(self, attributes=None, override=True):
        """Merges attributes for the form tag."""
        self.attributes = Field._merge_into(self.attributes, attributes,
                                            override)

    def set_options(self, options=None, override=True):
        """Merges options."""
        self.options = Field._merge_into(self.options, options, override)

    def set_field_wrapper(self, tag='li', attributes=None):
        """Sets the wrapper tag and attributes for fields added afterwards."""
        self.field_wrapper_tag = tag
        self.field_wrapper_attributes = _force_dict(attributes)

    def set_field_attributes(self, attributes=None):
        """Sets the default attributes for fields added afterwards."""
        self.field_attributes = _force_dict(attributes)

    def set_field_options(self, options=None):
        """Sets the default options for fields added afterwards."""
        self.field_options = _force_dict(options)

    def set_values(self, values=None):
        """Sets the values used to populate fields added afterwards.  This
        does not change :meth:`is_submitted`.
        """
        self.values = _force_dict(values)

    def set_errors(self, errors=None):
        """Sets the errors attached to fields added afterwards."""
        self.errors = _force_dict(errors)

    def add_field(self, field_type='text', field_name='', label=None,
                  attributes=None, options=None, wrapper_attributes=None):
        """Creates a field, cascades the form defaults, values and errors
        into it and adds it to the form.  The field is returned for further
        customization.
        """
        attributes = _merge(self.field_attributes, attributes)
        options = _merge(self.field_options, options)
        wrapper_attributes = _merge(self.field_wrapper_attributes,
                                    wrapper_attributes)
        field = self.variants.create(field_type, field_name, label,
                                     attributes, options, wrapper_attributes)
        field.populate(self.values)
        field.disable_errors(not self.render_errors)
        field.set_wrapper(self.field_wrapper_tag,
                          self.field_wrapper_attributes, override=False)
        field.set_form(self)
        if field_name in self.errors:
            field.set_errors(_to_list(self.errors[field_name]))
        self.fields.append(field)
        return field

    def add_html(self, html=u''):
        """Adds raw HTML to the form.  In progressive render mode it's
        written out immediately.
        """
        self.fields.append(html)
        if self._progressive_render:
            self._written.add(len(self.fields) - 1)
            write(raw(html), self.stream)

    def get_field(self, name):
        """Returns the first field with the given name or `None`."""
        for field in self.fields:
            if isinstance(field, Field) and field.field_name == name:
                return field

    def progressive_render(self, on=True):
        """Turns progressive render mode on or off."""
        self._progressive_render = on

    def progressive_render_enabled(self):
        """True if the form is in progressive render mode."""
        return self._progressive_render

    def add_class(self, name):
        """Adds a CSS class to the form tag."""
        if isinstance(name, str):
            self.classes.add(name)

    def remove_class(self, name):
        """Removes a CSS class from the form tag."""
        if isinstance(name, str):
            self.classes.remove(name)
            self.attributes['class'] = strip_class(self.attributes['class'],
                                                   name)

    def _pre_render(self):
        """Called before the opening tag is rendered."""
        self.classes.merge(split_classes(self.attributes['class']))
        self.attributes['class'] = str(self.classes) or None

    def _post_render(self):
        """Called before the closing tag is rendered."""

    def _emit(self, markup, echo):
        if echo is None:
            echo = self._progressive_render
        if echo:
            write(markup, self.stream)
        return markup

    def open(self, echo=None):
        """Renders the opening form tag."""
        self._pre_render()
        rv = raw(self.options['before'])
        if self.options['render_tag']:
            rv += open_tag('form', self.attributes) + \
                raw(self.options['before_inner'])
        return self._emit(rv, echo)

    def close(self, echo=None):
        """Renders the closing form tag."""
        self._post_render()
        rv = Markup(u'')
        if self.options['render_tag']:
            rv += raw(self.options['after_inner']) + close_tag('form')
        rv += raw(self.options['after'])
        return self._emit(rv, echo)

    def render_fields(self, echo=None):
        """Renders all fields and HTML snippets in the order they were
        added.  When writing, snippets that progressive mode already wrote
        in :meth:`add_html` are skipped.
        """
        if echo is None:
            echo = self._progressive_render
        rv = []
        for idx, field in enumerate(self.fields):
            if isinstance(field, Field):
                rv.append(field.render(echo=False))
            elif isinstance(field, str) and \
                 not (echo and idx in self._written):
                rv.append(raw(field))
        return self._emit(Markup(u'').join(rv), echo)

    def render(self, echo=False):
        """Renders the whole form."""
        rv = self.open(echo=False) + self.render_fields(echo=False) + \
            self.close(echo=False)
        if echo:
            write(rv, self.stream)
        return rv

    def __iter__(self):
        return iter(self.fields)

    def __len__(self):
        return len(self.fields)

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__,
                            self.attributes.get('action'))
