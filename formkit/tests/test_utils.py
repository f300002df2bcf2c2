# -*- coding: utf-8 -*-
"""
    formkit.tests.test_utils
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Tests the markup helpers and the context local.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import io
import unittest

from markupsafe import Markup

from formkit.tests import FormkitTestCase
from formkit.utils import html, ctxlocal


class HTMLTestCase(FormkitTestCase):

    def test_doctests(self):
        """Doctests of the markup helpers"""
        self.assert_doctests(html)

    def test_attributes(self):
        """Attributes keep their order, are escaped and None is skipped"""
        rv = html.render_attributes({'b': '1', 'a': None, 'c': '"<x>"'})
        self.assertEqual(rv, u' b="1" c="&#34;&lt;x&gt;&#34;"')
        self.assertTrue(isinstance(rv, Markup))

    def test_element_escaping(self):
        """Content is escaped unless it's markup"""
        self.assertEqual(html.element('span', u'<b>'),
                         u'<span>&lt;b&gt;</span>')
        self.assertEqual(html.element('span', Markup(u'<b>')),
                         u'<span><b></span>')
        self.assertEqual(html.raw(None), u'')
        self.assertEqual(html.raw(u'<hr>'), u'<hr>')

    def test_class_list(self):
        """Class lists are ordered sets"""
        classes = html.ClassList()
        classes.add('a')
        classes.add('b')
        classes.add('a')
        self.assertEqual(str(classes), 'a b')
        classes.remove('a')
        classes.remove('missing')
        self.assertEqual(str(classes), 'b')
        classes.merge(html.split_classes(u'c  b'))
        self.assertEqual(str(classes), 'c b')
        self.assertEqual(html.split_classes(None), [])
        self.assertEqual(html.strip_class(u'a b', 'a'), u'b')
        self.assertEqual(html.strip_class(u'a', 'a'), None)

    def test_write(self):
        """Markup is written to the stream"""
        stream = io.StringIO()
        rv = html.write(html.close_tag('form'), stream)
        self.assertEqual(stream.getvalue(), u'</form>')
        self.assertEqual(rv, u'</form>')


class ContextLocalTestCase(FormkitTestCase):

    def test_bind_request(self):
        """Requests are bound to the local and cleaned up"""
        class Holder(object):
            request = ctxlocal.LocalProperty('request')
        request = object()
        ctxlocal.bind_request(request)
        self.assertTrue(Holder().request is request)
        ctxlocal.local_mgr.cleanup()
        self.assertTrue(Holder().request is None)


def suite():
    suite = unittest.TestSuite()
    loader = unittest.defaultTestLoader
    suite.addTest(loader.loadTestsFromTestCase(HTMLTestCase))
    suite.addTest(loader.loadTestsFromTestCase(ContextLocalTestCase))
    return suite


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
