# -*- coding: utf-8 -*-
"""
    formkit.tests
    ~~~~~~~~~~~~~

    This module collects all the tests for formkit.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import doctest
import logging
import unittest
import warnings

import structlog
from html5lib import HTMLParser
from html5lib.treebuilders import getTreeBuilder


# ignore lxml and html5lib warnings
warnings.filterwarnings('ignore', message='lxml does not preserve')

# the toolkit logs on debug level, keep the test output readable
structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))


html_parser = HTMLParser(tree=getTreeBuilder('lxml'),
                         namespaceHTMLElements=False)


def parse_html(markup):
    """Parses a rendered fragment into an lxml tree."""
    return html_parser.parse(u'<!doctype html><title>test</title>'
                             u'<body>%s</body>' % markup)


class FormkitTestCase(unittest.TestCase):
    """Subclass of the standard test case that restores the settings and
    the process wide registries after each test.
    """

    def setUp(self):
        from formkit import settings, fields, validation
        from formkit.utils.ctxlocal import local_mgr
        self.__old_settings = dict(settings.__dict__)
        settings.revert_to_default()
        self.__old_variants = dict(fields.variants._variants)
        self.__old_rules = dict(validation.rules._rules)
        local_mgr.cleanup()

    def tearDown(self):
        from formkit import settings, fields, validation
        from formkit.utils.ctxlocal import local_mgr
        local_mgr.cleanup()
        fields.variants._variants.clear()
        fields.variants._variants.update(self.__old_variants)
        validation.rules._rules.clear()
        validation.rules._rules.update(self.__old_rules)
        settings.__dict__.clear()
        settings.__dict__.update(self.__old_settings)

    def parse(self, markup):
        """Parses rendered markup into an lxml tree."""
        return parse_html(markup)

    def assert_doctests(self, module):
        """Runs the doctests of a module."""
        failed, attempted = doctest.testmod(module)
        self.assertEqual(failed, 0)


def suite():
    from formkit.tests import test_settings, test_utils, test_fields, \
         test_form, test_validation, test_handler, test_toolkit
    suite = unittest.TestSuite()
    suite.addTest(test_settings.suite())
    suite.addTest(test_utils.suite())
    suite.addTest(test_fields.suite())
    suite.addTest(test_form.suite())
    suite.addTest(test_validation.suite())
    suite.addTest(test_handler.suite())
    suite.addTest(test_toolkit.suite())
    return suite
