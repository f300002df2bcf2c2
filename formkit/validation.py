# -*- coding: utf-8 -*-
"""
    formkit.validation
    ~~~~~~~~~~~~~~~~~~

    A small rule based validator for submitted values.  Rules are predicates
    with the signature ``(values, field_name, data)`` that return `True` if
    the value is fine, `False` if it isn't or an error message.

    >>> is_valid_email({'email': u'a@b.co'}, 'email')
    True
    >>> print(is_valid_email({'email': u'a@b..co'}, 'email'))
    This is not a valid email

    Rules are added to a :class:`Validator` by name, by import string or as
    a callable and run in the order they were added.  All rules of all
    fields run, a field can collect more than one error.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import re
from numbers import Number

from werkzeug.utils import import_string

from formkit.i18n import lazy_gettext, is_lazy_string
from formkit.fields import _force_dict, _to_string
from formkit.utils.log import get_logger


logger = get_logger(__name__)

#: the message used if neither the rule nor the predicate provide one
DEFAULT_ERROR_MESSAGE = lazy_gettext(u'Please correct this field')

_email_local_re = re.compile(r"^[a-zA-Z0-9!#$%&'*+/=?^_`{|}~.-]+$")
_email_sub_re = re.compile(r'^[a-z0-9-]+$', re.I)
_whitespace = u' \t\n\r\0\x0b'


def _is_message(value):
    return isinstance(value, str) or is_lazy_string(value)


def _is_comparable(value):
    return isinstance(value, (str, Number)) and not isinstance(value, bool)


def is_not_empty(values, field_name, data=None):
    """Fails for missing values, empty strings and empty collections."""
    value = _force_dict(values).get(field_name)
    if value is None or value == u'' or \
       (isinstance(value, (list, tuple, dict, set)) and not value):
        return lazy_gettext(u'This field cannot be empty')
    return True


def is_equal_to(values, field_name, data=None):
    """Compares the value with `data`.  Strings and numbers compare by
    their string representation, so ``u'42'`` is equal to ``42``.  If `data`
    is neither a string nor a number the comparison does not apply and the
    rule passes.  A missing value counts as an empty string.
    """
    if not _is_comparable(data):
        return True
    value = _force_dict(values).get(field_name)
    if value is None:
        value = u''
    if value == data or (_is_comparable(value) and
                         _to_string(value) == _to_string(data)):
        return True
    return lazy_gettext(u'This field must be equal to %s') % data


def is_exactly_equal_to(values, field_name, data=None):
    """Like :func:`is_equal_to` but the types have to match as well."""
    if not _is_comparable(data):
        return True
    value = _force_dict(values).get(field_name)
    if type(value) is type(data) and value == data:
        return True
    return lazy_gettext(u'This field must be equal to %s') % data


def is_identical_to(values, field_name, data=None):
    """Checks that the value is identical to the value of the field named
    by `data`.  Lists are compared ignoring the order of the items, strings
    ignoring surrounding whitespace.
    """
    values = _force_dict(values)
    value = values.get(field_name)
    other = values.get(data)
    if isinstance(value, (list, tuple)):
        if isinstance(other, (list, tuple)) and \
           all(x in other for x in value) and \
           all(x in value for x in other):
            return True
    elif isinstance(value, str):
        if isinstance(other, str) and value.strip() == other.strip():
            return True
    return lazy_gettext(u'This field must be equal to %s') % data


def is_valid_email(values, field_name, data=None):
    """Does a structural check of an email address.  This does not
    implement the full RFC but catches the common typos.
    """
    email = _force_dict(values).get(field_name)
    if not email:
        return lazy_gettext(u'Email must not be blank')
    invalid = lazy_gettext(u'This is not a valid email')
    if not isinstance(email, str):
        return invalid
    if len(email) < 3:
        return lazy_gettext(u'Email is too short')
    if email.find(u'@', 1) < 0:
        return lazy_gettext(u'Email has no @ symbol')

    local, domain = email.split(u'@', 1)
    if _email_local_re.match(local) is None:
        return invalid
    if u'..' in domain or domain.strip(_whitespace + u'.') != domain:
        return invalid
    subs = domain.split(u'.')
    if len(subs) < 2:
        return invalid
    for sub in subs:
        if sub.strip(_whitespace + u'-') != sub or \
           _email_sub_re.match(sub) is None:
            return invalid
    return True


def matches_pattern(values, field_name, data=None):
    """Checks the value against the regular expression in `data`.
    Values that are not strings never match.
    """
    value = _force_dict(values).get(field_name)
    if not isinstance(value, str):
        return False
    try:
        pattern = re.compile(data)
    except (re.error, TypeError) as e:
        logger.warning('invalid validation pattern', pattern=repr(data),
                       error=str(e))
        return False
    return pattern.search(value) is not None


class ValidationRule(object):
    """A predicate bound to a field together with an optional error message
    that replaces the built-in one and the data passed to the predicate.
    """

    def __init__(self, predicate, error_message=None, data=None):
        self.predicate = predicate
        self.error_message = error_message
        self.data = data

    def check(self, values, field_name):
        """Runs the predicate and returns the error message or `None` if
        the rule passed.  A message returned by the predicate wins over the
        message of the rule.
        """
        result = self.predicate(values, field_name, self.data)
        if _is_message(result):
            return result
        if result is not False:
            return None
        if self.error_message is not None:
            return self.error_message
        message = getattr(self.predicate, 'message', None)
        if message is not None:
            return message
        return DEFAULT_ERROR_MESSAGE

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__,
                            getattr(self.predicate, '__name__',
                                    self.predicate))


class RuleRegistry(object):
    """Maps rule names to predicates.  The toolkit uses the module level
    :data:`rules` registry, tests can create isolated ones.
    """

    builtins = (is_not_empty, is_equal_to, is_exactly_equal_to,
                is_identical_to, is_valid_email, matches_pattern)

    def __init__(self, seed=True):
        self._rules = {}
        if seed:
            for predicate in self.builtins:
                self._rules[predicate.__name__] = predicate

    def register(self, name, predicate):
        """Registers a predicate under a name."""
        self._rules[name] = predicate

    def resolve(self, rule):
        """Resolves a rule to a predicate.  `rule` is a callable, the name
        of a registered rule or an import string.  Returns `None` if the
        rule can't be resolved.
        """
        if isinstance(rule, str):
            predicate = self._rules.get(rule)
            if predicate is None and ('.' in rule or ':' in rule):
                predicate = import_string(rule, silent=True)
                if predicate is None:
                    logger.warning('import failed', import_name=rule)
            rule = predicate
        if callable(rule):
            return rule

    def names(self):
        """Returns the sorted names of the registered rules."""
        return sorted(self._rules)

    def copy(self):
        """Returns an independent copy of the registry."""
        rv = self.__class__(seed=False)
        rv._rules.update(self._rules)
        return rv

    def __contains__(self, name):
        return name in self._rules


#: the process wide registry
rules = RuleRegistry()


def register_rule(name, predicate):
    """Registers a predicate with the process wide registry."""
    rules.register(name, predicate)


class Validator(object):
    """Validates a snapshot of submitted values.  Usage::

        validator = Validator(request.form)
        validator.add_rule('email', 'is_valid_email')
        validator.add_rule('password', 'is_not_empty',
                           u'Please pick a password')
        validator.add_rule('confirm', 'is_identical_to', data='password')
        if not validator.validate():
            errors = validator.get_errors()
    """

    def __init__(self, values=None, registry=None):
        self.fields = dict(_force_dict(values))
        if registry is None:
            registry = rules
        self.registry = registry
        self.rules = {}
        self.errors = {}

    def add_rule(self, field_name, rule, error_msg=None, data=None):
        """Adds a rule for a field.  Returns `False` and does not add the
        rule if it can't be resolved.
        """
        predicate = self.registry.resolve(rule)
        if predicate is None:
            logger.warning('unresolvable validation rule', field=field_name,
                           rule=repr(rule))
            return False
        self.rules.setdefault(field_name, []).append(
            ValidationRule(predicate, error_msg, data))
        return True

    def validate(self):
        """Runs all rules and returns `True` if no rule failed.  The errors
        of a previous run are discarded.
        """
        self.errors = {}
        for field_name, field_rules in self.rules.items():
            for rule in field_rules:
                message = rule.check(self.fields, field_name)
                if message is not None:
                    self.errors.setdefault(field_name, []).append(message)
        logger.debug('validation finished', failed_fields=len(self.errors))
        return not self.errors

    def get_errors(self):
        """Returns a dict of error lists keyed by field name."""
        return self.errors

    def get_field_errors(self, field_name):
        """Returns the errors of one field."""
        return self.errors.get(field_name, [])

    def has_errors(self):
        """True if the last validation run failed."""
        return bool(self.errors)
