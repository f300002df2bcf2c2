# -*- coding: utf-8 -*-
"""
    formkit.fields
    ~~~~~~~~~~~~~~

    Implements the form fields.  A field knows how to render itself (label,
    wrapper, error box and the form control) and how to pick up its value
    from a dict of submitted values.

    Fields are usually created through :meth:`formkit.form.Form.add_field`
    which cascades the form wide field defaults into them, but they can be
    used standalone as well:

    >>> field = create_field('text', 'username', u'Username',
    ...                      attributes={'id': 'f_username'})
    >>> field.populate({'username': u'john'})
    >>> print(field.render())
    <label for="f_username">Username</label><input type="text" name="username" id="f_username" value="john" />

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import weakref

from markupsafe import Markup, escape

from formkit import settings
from formkit.loader import LoadError, load_class
from formkit.utils.html import ClassList, open_tag, close_tag, void_tag, \
     element, raw, split_classes, strip_class, write
from formkit.utils.log import get_logger


logger = get_logger(__name__)


def _force_dict(value):
    """If the value is not a dict, return an empty one."""
    if value is None or not isinstance(value, dict):
        return {}
    return value


def _to_string(value):
    """Convert a value to a string, None means empty string."""
    if value is None:
        return u''
    return str(value)


def _to_list(value):
    """Converts a value into a list without dropping data."""
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        return [value]
    try:
        return list(value)
    except TypeError:
        return [value]


def _merge(defaults, overrides):
    """Merges two mappings, the keys of `overrides` win.  The order of
    the defaults is kept and new keys are appended.
    """
    rv = dict(defaults)
    rv.update(_force_dict(overrides))
    return rv


def _value_matches_choice(value, choice):
    """Checks if a given value matches a choice."""
    return choice == value or _to_string(choice) == _to_string(value)


def _is_choice_selected(values, choice):
    """Checks if the choice is in the list of selected values."""
    for value in values:
        if _value_matches_choice(value, choice):
            return True
    return False


class Field(object):
    """Base class of all fields.  Subclasses hook into the rendering by
    overriding `_pre_render`, `_post_render`, `_render_label` and
    `_render_form_el` and into the population by overriding `populate`.
    """

    #: the type token the field was registered with
    type_token = None

    #: the number of tab indexes the field claims from the form.  `None`
    #: means the field is not part of the tab order.
    tab_indexes = None

    default_attributes = {
        'type':         'text',
        'name':         None,
        'class':        None,
        'id':           None,
        'value':        None
    }

    default_options = {
        'required':                 False,
        'required_class':           None,
        'before':                   u'',
        'after':                    u'',
        'label_before':             u'',
        'label_before_inner':       u'',
        'label_after_inner':        u'',
        'label_after':              u'',
        'error_render_position':    None,
        'error_box_class':          None
    }

    default_wrapper_attributes = {
        'id':           None,
        'class':        None
    }

    def __init__(self, field_name='', label=None, attributes=None,
                 options=None, wrapper_attributes=None):
        self.field_name = field_name
        self.label = label
        self.attributes = _merge(self.default_attributes, attributes)
        self.options = _merge(self.get_default_options(), options)
        self.wrapper_attributes = _merge(self.default_wrapper_attributes,
                                         wrapper_attributes)
        self.wrapper_tag = None
        self.classes = ClassList()
        self.wrapper_classes = ClassList()
        self.errors = []
        self.render_errors = True
        self._form = None
        self.attributes['name'] = self.make_name()
        if self.options['required']:
            self.add_wrapper_class(self.options['required_class'])

    def get_default_options(self):
        """The default options of the field.  The values that can be
        configured are filled from the settings.
        """
        rv = dict(self.default_options)
        rv['required_class'] = settings.REQUIRED_CLASS
        rv['error_render_position'] = settings.ERROR_RENDER_POSITION
        rv['error_box_class'] = settings.ERROR_BOX_CLASS
        return rv

    def make_name(self):
        """Returns the value for the name attribute."""
        return self.field_name or None

    def _get_form(self):
        if self._form is not None:
            return self._form()
    def _set_form(self, form):
        if form is None:
            self._form = None
        else:
            self._form = weakref.ref(form)
    form = property(_get_form, _set_form, doc='''
        The form the field belongs to or `None`.  Fields only hold a weak
        reference to their form.''')
    del _get_form, _set_form

    def set_form(self, form=None):
        """Sets the parent form.  The form is necessary for the default
        values and the tab indexes.
        """
        self.form = form

    def disable_errors(self, disable=True):
        """Disables rendering of field errors."""
        self.render_errors = not disable

    def set_wrapper(self, tag='li', attributes=None, override=True):
        """Sets the wrapper tag of the field and merges the wrapper
        attributes.
        """
        self.wrapper_tag = tag
        self.set_wrapper_attributes(attributes, override)

    def set_attribute(self, name, value=None):
        """Sets an HTML attribute.  `None` values are not rendered."""
        self.attributes[name] = value

    def set_option(self, name, value=None):
        """Sets an option."""
        self.options[name] = value

    def set_attributes(self, attributes=None, override=True):
        """Merges the attributes into the existing ones.  If `override` is
        false existing attributes win.
        """
        self.attributes = self._merge_into(self.attributes, attributes,
                                           override)

    def set_options(self, options=None, override=True):
        """Merges the options into the existing ones."""
        self.options = self._merge_into(self.options, options, override)

    def set_wrapper_attributes(self, attributes=None, override=True):
        """Merges the wrapper attributes into the existing ones."""
        self.wrapper_attributes = self._merge_into(self.wrapper_attributes,
                                                   attributes, override)

    @staticmethod
    def _merge_into(current, new, override):
        if override:
            return _merge(current, new)
        rv = dict(current)
        for key, value in _force_dict(new).items():
            rv.setdefault(key, value)
        return rv

    def disabled(self, disabled=True):
        """Disables the field by setting the disabled attribute."""
        self.set_attribute('disabled', disabled and 'disabled' or None)

    def add_class(self, name):
        """Adds a CSS class to the form control."""
        if isinstance(name, str):
            self.classes.add(name)

    def remove_class(self, name):
        """Removes a CSS class from the form control."""
        if isinstance(name, str):
            self.classes.remove(name)
            self.attributes['class'] = strip_class(self.attributes['class'],
                                                   name)

    def add_wrapper_class(self, name):
        """Adds a CSS class to the wrapper."""
        if isinstance(name, str):
            self.wrapper_classes.add(name)

    def remove_wrapper_class(self, name):
        """Removes a CSS class from the wrapper."""
        if isinstance(name, str):
            self.wrapper_classes.remove(name)
            self.wrapper_attributes['class'] = strip_class(
                self.wrapper_attributes['class'], name)

    def populate(self, values):
        """Populates the field from a dict of values.  The base field has
        no value (submit buttons and the like).
        """

    def set_default(self, value=None, form_is_submitted=False):
        """Shows `value` unless the form was submitted.  This only works
        for fields bound to a form that renders the submitted marker.
        """
        form = self.form
        if form is not None and not form.is_submitted() \
           and not form_is_submitted:
            self.populate({self.field_name: value})

    def set_errors(self, errors=None):
        """Sets the error messages of the field."""
        self.errors = _to_list(errors)

    def get_errors(self):
        """Returns the error messages of the field."""
        return self.errors

    def add_error(self, message):
        """Adds an error message.  `None` is ignored."""
        if message is not None:
            self.errors.append(message)

    def render_errors_markup(self):
        """Renders the error box."""
        items = [element('span', message) for message in self.errors]
        return open_tag('div', {'class': self.options['error_box_class']}) + \
            Markup(u'').join(items) + close_tag('div')

    def _claim_tab_indexes(self, count):
        """Claims `count` tab indexes from the form and returns the first
        one, or `None` if the form doesn't render tab indexes.
        """
        form = self.form
        if form is None or not form.tab_indexes_enabled():
            return None
        last = form.get_last_tab_index()
        form.set_last_tab_index(last + count)
        return last + 1

    def _pre_render(self):
        """Called before rendering.  Merges the class attributes with the
        tracked classes and claims the tab index.
        """
        self.classes.merge(split_classes(self.attributes['class']))
        self.attributes['class'] = str(self.classes) or None
        self.wrapper_classes.merge(
            split_classes(self.wrapper_attributes['class']))
        self.wrapper_attributes['class'] = str(self.wrapper_classes) or None
        if self.tab_indexes == 1:
            index = self._claim_tab_indexes(1)
            if index is not None:
                self.attributes['tabindex'] = index

    def _post_render(self):
        """Called after rendering."""

    def _errors_at(self, position):
        if self.render_errors and self.errors and \
           self.options['error_render_position'] == position:
            return self.render_errors_markup()
        return Markup(u'')

    def _render_wrapper(self, close=False):
        if close:
            return close_tag(self.wrapper_tag)
        return open_tag(self.wrapper_tag, self.wrapper_attributes)

    def _render_label(self):
        attrs = {'for': self.attributes.get('id')}
        return self._label_markup(self.label, attrs)

    def _label_markup(self, text, attributes):
        o = self.options
        return raw(o['label_before']) + open_tag('label', attributes) + \
            raw(o['label_before_inner']) + escape(text) + \
            raw(o['label_after_inner']) + close_tag('label') + \
            raw(o['label_after'])

    def _render_form_el(self):
        return raw(self.options['before']) + \
            void_tag('input', self.attributes) + raw(self.options['after'])

    def render(self, echo=None):
        """Renders the field and returns the markup.  If `echo` is true the
        markup is also written to the stream of the form.  It defaults to
        true if the form is in progressive render mode.
        """
        self._pre_render()
        rv = [self._errors_at('top_outside')]
        if self.wrapper_tag is not None:
            rv.append(self._render_wrapper())
        rv.append(self._errors_at('top_inside'))
        if self.label is not None:
            rv.append(self._render_label())
        rv.append(self._render_form_el())
        rv.append(self._errors_at('bottom_inside'))
        if self.wrapper_tag is not None:
            rv.append(self._render_wrapper(close=True))
        rv.append(self._errors_at('bottom_outside'))
        self._post_render()
        markup = Markup(u'').join(rv)
        form = self.form
        if echo is None:
            echo = form is not None and form.progressive_render_enabled()
        if echo:
            write(markup, form is not None and form.stream or None)
        return markup

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self.field_name)


class TextField(Field):
    """An ``<input type="text">``.  The type can be overridden for the
    HTML5 input types like ``email`` or ``number``.
    """
    type_token = 'text'
    tab_indexes = 1

    def make_name(self):
        return self.field_name

    def populate(self, values):
        values = _force_dict(values)
        if self.field_name in values:
            self.attributes['value'] = values[self.field_name]


class PasswordField(TextField):
    """An ``<input type="password">``."""
    type_token = 'password'
    default_attributes = dict(Field.default_attributes, type='password')


class HiddenField(TextField):
    """An ``<input type="hidden">``.  Hidden fields are not part of the
    tab order.
    """
    type_token = 'hidden'
    tab_indexes = None
    default_attributes = dict(Field.default_attributes, type='hidden')


class TextareaField(Field):
    """A ``<textarea>``.  The value is rendered as content of the element,
    not as attribute.
    """
    type_token = 'textarea'
    tab_indexes = 1
    default_attributes = dict(Field.default_attributes, type=None)

    def __init__(self, field_name='', label=None, attributes=None,
                 options=None, wrapper_attributes=None):
        Field.__init__(self, field_name, label, attributes, options,
                       wrapper_attributes)
        self.value = u''

    def make_name(self):
        return self.field_name

    def populate(self, values):
        values = _force_dict(values)
        if self.field_name in values:
            self.value = values[self.field_name]

    def _render_form_el(self):
        return raw(self.options['before']) + \
            element('textarea', _to_string(self.value), self.attributes) + \
            raw(self.options['after'])


class CheckboxField(Field):
    """A single ``<input type="checkbox">``.  The checkbox is checked if
    the field name is in the submitted values, no matter the value.  Use
    a :class:`CheckboxGroupField` for ``name[]`` style checkboxes.
    """
    type_token = 'checkbox'
    tab_indexes = 1
    default_attributes = dict(Field.default_attributes, type='checkbox')

    def __init__(self, field_name='', label=None, attributes=None,
                 options=None, wrapper_attributes=None):
        Field.__init__(self, field_name, label, attributes, options,
                       wrapper_attributes)
        if not self.attributes.get('value'):
            self.attributes['value'] = 'on'

    def make_name(self):
        return self.field_name

    def populate(self, values):
        if self.field_name in _force_dict(values):
            self.attributes['checked'] = 'checked'


class SubmitField(Field):
    """An ``<input type="submit">``.  Buttons never pick up values."""
    type_token = 'submit'
    tab_indexes = 1
    default_attributes = dict(Field.default_attributes, type='submit')


class ButtonField(SubmitField):
    """An ``<input type="button">``."""
    type_token = 'button'
    default_attributes = dict(Field.default_attributes, type='button')


class _InputGroupField(Field):
    """Base class for groups of inputs sharing a ``name[]``.  Every member
    gets its own label and its own tab index.
    """

    default_options = dict(Field.default_options,
        group_before=u'',
        group_after=u'',
        label_position='before'
    )

    def __init__(self, field_name='', label=None, attributes=None,
                 options=None, wrapper_attributes=None):
        Field.__init__(self, field_name, label, attributes, options,
                       wrapper_attributes)
        self.attributes['value'] = None
        self.members = []
        self.values = []
        self.start_tab_index = None

    def make_name(self):
        return u'%s[]' % self.field_name

    def add_member(self, value=u'', label=u''):
        """Adds a member to the group."""
        self.members.append({'value': value, 'label': label})

    def add_members(self, members):
        """Adds members to the group.  Members are dicts with a `value` and
        a `label` key or ``(value, label)`` tuples.
        """
        for member in members or ():
            if isinstance(member, dict):
                self.add_member(member.get('value', u''),
                                member.get('label', u''))
            elif isinstance(member, tuple):
                self.add_member(*member[:2])
            else:
                self.add_member(member, member)

    def set_members(self, members):
        """Replaces all members of the group."""
        self.members = []
        self.add_members(members)

    def populate(self, values):
        values = _force_dict(values)
        if self.field_name in values:
            self.values = _to_list(values[self.field_name])

    def is_checked(self, value):
        """Checks if the member with the given value is checked."""
        return _is_choice_selected(self.values, value)

    def _pre_render(self):
        Field._pre_render(self)
        self.start_tab_index = self._claim_tab_indexes(len(self.members))

    def _render_label(self):
        return Markup(u'')

    def _member_id(self, value):
        if self.attributes.get('id') is not None:
            return u'%s_%s' % (self.attributes['id'], value)

    def _render_member_label(self, member):
        return self._label_markup(member['label'],
                                  {'for': self._member_id(member['value'])})

    def _render_member(self, member, tab_index):
        attrs = dict(self.attributes)
        attrs['id'] = self._member_id(member['value'])
        attrs['value'] = _to_string(member['value'])
        if self.is_checked(member['value']):
            attrs['checked'] = 'checked'
        if tab_index is not None:
            attrs['tabindex'] = tab_index
        label = self._render_member_label(member)
        position = self.options['label_position']
        rv = [raw(self.options['before'])]
        if position == 'before':
            rv.append(label)
        rv.append(void_tag('input', attrs))
        if position == 'after':
            rv.append(label)
        rv.append(raw(self.options['after']))
        return Markup(u'').join(rv)

    def _render_form_el(self):
        rv = [raw(self.options['group_before'])]
        tab_index = self.start_tab_index
        for member in self.members:
            rv.append(self._render_member(member, tab_index))
            if tab_index is not None:
                tab_index += 1
        rv.append(raw(self.options['group_after']))
        return Markup(u'').join(rv)


class CheckboxGroupField(_InputGroupField):
    """A group of ``<input type="checkbox" name="field[]">``."""
    type_token = 'checkbox_group'
    default_attributes = dict(Field.default_attributes, type='checkbox')

    def add_checkbox(self, value=u'', label=u''):
        """Adds a checkbox to the group."""
        self.add_member(value, label)

    def add_checkboxes(self, checkboxes):
        """Adds checkboxes to the group."""
        self.add_members(checkboxes)

    def set_checkboxes(self, checkboxes):
        """Replaces all checkboxes of the group."""
        self.set_members(checkboxes)


class RadioGroupField(_InputGroupField):
    """A group of ``<input type="radio" name="field[]">``."""
    type_token = 'radio_group'
    default_attributes = dict(Field.default_attributes, type='radio')

    def add_radio(self, value=u'', label=u''):
        """Adds a radio button to the group."""
        self.add_member(value, label)

    def add_radios(self, radios):
        """Adds radio buttons to the group."""
        self.add_members(radios)

    def set_radios(self, radios):
        """Replaces all radio buttons of the group."""
        self.set_members(radios)


class SelectField(Field):
    """A ``<select>`` box.  Options can be put into option groups and
    sorted by label:

    >>> field = SelectField('country', options={'sort': 'asc'})
    >>> field.add_select_options([('at', u'Austria'), ('de', u'Germany'),
    ...                           ('us', u'USA', u'America'),
    ...                           ('ca', u'Canada', u'America')])
    >>> field.populate({'country': 'de'})
    >>> print(field.render())
    <select name="country"><optgroup label="America"><option value="ca">Canada</option><option value="us">USA</option></optgroup><option value="at">Austria</option><option value="de" selected="selected">Germany</option></select>
    """
    type_token = 'select'
    tab_indexes = 1
    default_attributes = dict(Field.default_attributes, type=None)

    def __init__(self, field_name='', label=None, attributes=None,
                 options=None, wrapper_attributes=None):
        Field.__init__(self, field_name, label, attributes, options,
                       wrapper_attributes)
        self.values = []
        self.select_options = {}
        self.option_groups = {}
        self.ungrouped_options = []
        self._sort = False
        self.sort_order = 'asc'
        if self.options.get('sort') is not None:
            self.sort(self.options['sort'])

    @property
    def multiple(self):
        """True if the select box allows multiple selections."""
        return bool(self.attributes.get('multiple'))

    def make_name(self):
        if self.multiple:
            return u'%s[]' % self.field_name
        return self.field_name

    def set_attribute(self, name, value=None):
        Field.set_attribute(self, name, value)
        if name == 'multiple':
            self.attributes['name'] = self.make_name()

    def set_attributes(self, attributes=None, override=True):
        Field.set_attributes(self, attributes, override)
        self.attributes['name'] = self.make_name()

    def populate(self, values):
        values = _force_dict(values)
        if self.field_name in values:
            self.values = _to_list(values[self.field_name])

    def add_select_option(self, value=u'', label=u'', option_group=None):
        """Adds an option.  Options are unique by label, adding a label a
        second time is ignored.
        """
        if label in self.select_options:
            return
        self.select_options[label] = {'value': value, 'label': label,
                                      'option_group': option_group}
        if option_group is not None:
            self.option_groups.setdefault(option_group, []).append(label)
        else:
            self.ungrouped_options.append(label)

    def add_select_options(self, select_options):
        """Adds options.  Options are dicts with a `value`, a `label` and an
        optional `option_group` key or ``(value, label[, group])`` tuples.
        """
        for option in select_options or ():
            if isinstance(option, dict):
                self.add_select_option(option.get('value', u''),
                                       option.get('label', u''),
                                       option.get('option_group'))
            elif isinstance(option, tuple):
                self.add_select_option(*option[:3])

    def set_select_options(self, select_options):
        """Replaces all options."""
        self.select_options = {}
        self.option_groups = {}
        self.ungrouped_options = []
        self.add_select_options(select_options)

    def sort(self, order='asc'):
        """Sort the options by label, ``'asc'`` or ``'desc'``.  If there
        are option groups the groups are sorted by name and the options
        within each group and the ungrouped options are sorted separately.
        """
        if not isinstance(order, str) or order.lower() not in ('asc', 'desc'):
            return
        self._sort = True
        self.sort_order = order.lower()

    def _sorted(self, keys):
        keys = list(keys)
        if self._sort:
            keys.sort(key=_to_string, reverse=self.sort_order == 'desc')
        return keys

    def _render_select_option(self, label):
        option = self.select_options[label]
        attrs = {'value': _to_string(option['value'])}
        if _is_choice_selected(self.values, option['value']):
            attrs['selected'] = 'selected'
        return element('option', option['label'], attrs)

    def _render_form_el(self):
        rv = [raw(self.options['before']), open_tag('select', self.attributes)]
        for group in self._sorted(self.option_groups):
            rv.append(open_tag('optgroup', {'label': group}))
            for label in self._sorted(self.option_groups[group]):
                rv.append(self._render_select_option(label))
            rv.append(close_tag('optgroup'))
        for label in self._sorted(self.ungrouped_options):
            rv.append(self._render_select_option(label))
        rv.append(close_tag('select'))
        rv.append(raw(self.options['after']))
        return Markup(u'').join(rv)


class VariantRegistry(object):
    """Maps field type tokens to field classes or factories.  The toolkit
    uses the module level :data:`variants` registry; tests and hosting
    applications that need isolation can create their own.
    """

    #: the type used for unknown tokens
    fallback = 'text'

    builtins = (TextField, PasswordField, HiddenField, TextareaField,
                CheckboxField, CheckboxGroupField, RadioGroupField,
                SelectField, SubmitField, ButtonField)

    def __init__(self, seed=True):
        self._variants = {}
        if seed:
            for cls in self.builtins:
                self._variants[cls.type_token] = cls

    def register(self, token, factory):
        """Registers a factory for a token.  The factory is a field class,
        a callable with the field constructor signature or an import string
        pointing to a field class.  Returns `True` or a
        :class:`~formkit.loader.LoadError`.
        """
        if isinstance(factory, str):
            factory = load_class(factory, Field)
            if isinstance(factory, LoadError):
                return factory
        if not callable(factory):
            return LoadError(u'Class: %r must be a subclass of Field' %
                             (factory,))
        logger.debug('field variant registered', token=token,
                     replaced=token in self._variants)
        self._variants[token] = factory
        return True

    def unregister(self, token):
        """Removes a token.  The fallback can't be removed."""
        if token != self.fallback:
            self._variants.pop(token, None)

    def lookup(self, token):
        """Returns the factory for the token.  Unknown tokens map to the
        text field.
        """
        rv = self._variants.get(token)
        if rv is None:
            logger.debug('unknown field type', token=token,
                         fallback=self.fallback)
            rv = self._variants[self.fallback]
        return rv

    def create(self, field_type='text', field_name='', label=None,
               attributes=None, options=None, wrapper_attributes=None):
        """Creates a field of the given type."""
        factory = self.lookup(field_type)
        return factory(field_name, label, attributes, options,
                       wrapper_attributes)

    def copy(self):
        """Returns an independent copy of the registry."""
        rv = self.__class__(seed=False)
        rv._variants.update(self._variants)
        return rv

    def __contains__(self, token):
        return token in self._variants

    def __iter__(self):
        return iter(sorted(self._variants))


#: the process wide registry
variants = VariantRegistry()


def register_variant(token, factory):
    """Registers a field variant with the process wide registry."""
    return variants.register(token, factory)


def create_field(field_type='text', field_name='', label=None,
                 attributes=None, options=None, wrapper_attributes=None):
    """Creates a standalone field from the process wide registry."""
    return variants.create(field_type, field_name, label, attributes,
                           options, wrapper_attributes)
