# -*- coding: utf-8 -*-
"""
    formkit.toolkit
    ~~~~~~~~~~~~~~~

    Shortcuts for the common objects of the toolkit.  A typical view looks
    like this::

        from formkit import toolkit

        handler = toolkit.create_handler(request)
        if handler.is_request():
            validator = toolkit.create_validator(handler.get_request())
            validator.add_rule('email', 'is_valid_email')
            if not validator.validate():
                handler.set_errors(validator.get_errors())

        form = toolkit.create_form({'action': request.path},
                                   values=handler.get_values(),
                                   errors=handler.get_errors())
        form.set_field_wrapper('li')
        form.add_field('text', 'email', u'Email')
        form.add_field('submit', attributes={'value': u'Subscribe'})
        return form.render()

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from formkit.fields import create_field, register_variant
from formkit.form import Form
from formkit.handler import RequestHandler
from formkit.validation import Validator, register_rule


__all__ = ['create_form', 'create_field', 'create_validator',
           'create_handler', 'register_variant', 'register_rule']


def create_form(attributes=None, options=None, values=None, errors=None,
                variants=None, stream=None):
    """Creates a new :class:`~formkit.form.Form`."""
    return Form(attributes, options, values, errors, variants, stream)


def create_validator(values=None, registry=None):
    """Creates a :class:`~formkit.validation.Validator` for the values."""
    return Validator(values, registry)


def create_handler(request=None, session=None):
    """Creates a :class:`~formkit.handler.RequestHandler`."""
    return RequestHandler(request, session)
