# -*- coding: utf-8 -*-
"""
    formkit.tests.test_form
    ~~~~~~~~~~~~~~~~~~~~~~~

    Tests the form: cascades, submission tracking, tab indexes and the
    two render modes.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import io
import unittest

from formkit.tests import FormkitTestCase
from formkit import form as form_module, settings
from formkit.fields import HiddenField, TextField, VariantRegistry
from formkit.form import Form


class FormTestCase(FormkitTestCase):

    def test_doctests(self):
        """Doctests of the form"""
        self.assert_doctests(form_module)

    def test_default_render(self):
        """An empty form renders the tag and the submitted marker"""
        self.assertEqual(Form().render(), u'<form action="" method="post">'
                         u'<input type="hidden" name="form_is_submitted" '
                         u'value="1" /></form>')

    def test_method_setting(self):
        """The default method comes from the settings"""
        settings.configure(DEFAULT_FORM_METHOD='get')
        self.assertEqual(Form().attributes['method'], 'get')
        self.assertEqual(Form({'method': 'put'}).attributes['method'], 'put')

    def test_submitted_marker(self):
        """The submitted state is decided once when the form is created"""
        form = Form()
        self.assertEqual(len(form), 1)
        marker = list(form)[0]
        self.assertTrue(isinstance(marker, HiddenField))
        self.assertEqual(marker.field_name, settings.SUBMITTED_MARKER)
        self.assertFalse(form.is_submitted())
        form.set_values({settings.SUBMITTED_MARKER: u'1'})
        self.assertFalse(form.is_submitted())

        values = {settings.SUBMITTED_MARKER: u'1'}
        form = Form(values=values)
        self.assertTrue(form.is_submitted())
        del values[settings.SUBMITTED_MARKER]
        form.set_values({})
        self.assertTrue(form.is_submitted())

        form = Form(options={'render_is_submitted_field': False},
                    values={settings.SUBMITTED_MARKER: u'1'})
        self.assertFalse(form.is_submitted())
        self.assertEqual(len(form), 0)

    def test_custom_marker(self):
        """The marker name can be configured"""
        settings.configure(SUBMITTED_MARKER='sent')
        self.assertTrue(Form(values={'sent': u'yes'}).is_submitted())
        self.assertFalse(Form(values={'form_is_submitted': u'1'})
                         .is_submitted())

    def test_attribute_cascade(self):
        """Call site attributes beat form defaults beat variant defaults"""
        form = Form()
        form.set_field_attributes({'type': 'search', 'class': 'form',
                                   'size': '10', 'maxlength': '5'})
        field = form.add_field('text', 'a', attributes={'size': '20',
                                                        'type': 'email'})
        self.assertEqual(field.attributes['type'], 'email')
        self.assertEqual(field.attributes['class'], 'form')
        self.assertEqual(field.attributes['size'], '20')
        self.assertEqual(field.attributes['maxlength'], '5')
        field = form.add_field('text', 'b')
        self.assertEqual(field.attributes['type'], 'search')
        self.assertEqual(field.attributes['size'], '10')

        form.set_field_attributes(None)
        field = form.add_field('text', 'c')
        self.assertEqual(field.attributes['type'], 'text')
        self.assertFalse('size' in field.attributes)

    def test_option_cascade(self):
        """Options cascade the same way"""
        form = Form(options={'render_is_submitted_field': False})
        form.set_field_options({'before': u'<p>', 'after': u'</p>',
                                'error_render_position': 'top_outside'})
        field = form.add_field('text', 'a', options={'after': u'</p>!'})
        self.assertEqual(field.options['before'], u'<p>')
        self.assertEqual(field.options['after'], u'</p>!')
        self.assertEqual(field.options['error_render_position'],
                         'top_outside')
        self.assertEqual(field.options['error_box_class'], 'field_error')

    def test_wrapper_cascade(self):
        """The form wrapper never overrides call site wrapper attributes"""
        form = Form(options={'render_is_submitted_field': False})
        form.set_field_wrapper('li', {'class': 'row', 'id': 'r'})
        field = form.add_field('text', 'a',
                               wrapper_attributes={'id': 'row_a'})
        self.assertEqual(field.wrapper_tag, 'li')
        self.assertEqual(field.render(), u'<li id="row_a" class="row">'
                         u'<input type="text" name="a" /></li>')
        field = form.add_field('text', 'b')
        self.assertEqual(field.wrapper_attributes['id'], 'r')

    def test_values_and_errors(self):
        """Values and errors are handed to the fields on creation"""
        form = Form(values={'a': u'x'}, errors={'a': [u'Bad'], 'b': u'Worse'})
        a = form.add_field('text', 'a')
        b = form.add_field('text', 'b')
        c = form.add_field('text', 'c')
        self.assertEqual(a.attributes['value'], u'x')
        self.assertEqual(a.get_errors(), [u'Bad'])
        self.assertEqual(b.get_errors(), [u'Worse'])
        self.assertEqual(c.get_errors(), [])
        self.assertTrue(a.form is form)

        form.set_values({'d': u'y'})
        form.set_errors({'d': [u'Nope']})
        d = form.add_field('text', 'd')
        self.assertEqual(d.attributes['value'], u'y')
        self.assertEqual(d.get_errors(), [u'Nope'])

    def test_disable_errors(self):
        """Disabling errors affects the fields added afterwards"""
        form = Form(errors={'a': [u'Bad'], 'b': [u'Bad']})
        a = form.add_field('text', 'a')
        form.disable_errors()
        b = form.add_field('text', 'b')
        self.assertTrue(u'field_error' in a.render())
        self.assertFalse(u'field_error' in b.render())

    def test_tab_indexes(self):
        """Tab indexes are claimed in order without gaps"""
        form = Form()
        form.enable_tab_indexes()
        self.assertTrue(form.tab_indexes_enabled())
        for name in 'abc':
            form.add_field('text', name)
        form.add_field('hidden', 'secret')
        group = form.add_field('checkbox_group', 'color',
                               attributes={'id': 'color'})
        group.add_checkboxes([('red', u'Red'), ('blue', u'Blue')])
        form.add_field('select', 'size')
        tree = self.parse(form.render())
        self.assertEqual(tree.xpath('//input[@tabindex]/@name'),
                         ['a', 'b', 'c', 'color[]', 'color[]'])
        self.assertEqual(tree.xpath('//*[@tabindex]/@tabindex'),
                         ['1', '2', '3', '4', '5', '6'])
        self.assertEqual(form.get_last_tab_index(), 6)

    def test_tab_index_counter(self):
        """The counter can be moved"""
        form = Form()
        form.enable_tab_indexes()
        form.set_last_tab_index(10)
        field = form.add_field('text', 'a')
        self.assertTrue(u'tabindex="11"' in field.render())
        form.enable_tab_indexes(False)
        field = form.add_field('text', 'b')
        self.assertFalse(u'tabindex' in field.render())

    def test_html_entries(self):
        """HTML snippets keep their position between the fields"""
        form = Form(options={'render_is_submitted_field': False})
        form.add_html(u'<fieldset>')
        form.add_field('text', 'a')
        form.add_html(u'</fieldset>')
        self.assertEqual(form.render_fields(), u'<fieldset><input type="text" '
                         u'name="a" /></fieldset>')
        self.assertEqual(len(form), 3)
        self.assertTrue(isinstance(form.get_field('a'), TextField))
        self.assertTrue(form.get_field('missing') is None)

    def test_wrap_options(self):
        """The form tag can be wrapped or left out"""
        options = {'render_is_submitted_field': False, 'before': u'<div>',
                   'before_inner': u'<ul>', 'after_inner': u'</ul>',
                   'after': u'</div>'}
        form = Form({'id': 'f'}, options)
        self.assertEqual(form.render(), u'<div><form action="" '
                         u'method="post" id="f"><ul></ul></form></div>')
        form.set_option('render_tag', False)
        self.assertEqual(form.render(), u'<div></div>')

    def test_form_attributes_and_classes(self):
        """Form attributes and classes are merged on open"""
        form = Form({'class': 'a'}, {'render_is_submitted_field': False})
        form.add_class('b')
        form.add_class('a')
        form.set_attribute('action', '/go')
        form.set_attributes({'data-role': 'signup', 'action': '/stay'},
                            override=False)
        self.assertEqual(form.open(), u'<form action="/go" method="post" '
                         u'class="a b" data-role="signup">')
        form.remove_class('a')
        self.assertEqual(form.attributes['class'], 'b')
        self.assertEqual(form.close(), u'</form>')

    def test_progressive_render(self):
        """In progressive mode every part is written when it's rendered"""
        stream = io.StringIO()
        form = Form({'action': '/x'}, {'render_is_submitted_field': False},
                    stream=stream)
        form.progressive_render()
        self.assertTrue(form.progressive_render_enabled())
        form.open()
        field = form.add_field('text', 'a')
        self.assertEqual(stream.getvalue(), u'<form action="/x" '
                         u'method="post">')
        field.render()
        form.add_html(u'<hr>')
        form.close()
        self.assertEqual(stream.getvalue(), u'<form action="/x" '
                         u'method="post"><input type="text" name="a" />'
                         u'<hr></form>')

    def test_progressive_render_fields(self):
        """render_fields writes all entries at once"""
        stream = io.StringIO()
        form = Form(options={'render_is_submitted_field': False},
                    stream=stream)
        form.add_field('text', 'a')
        form.add_html(u'<br>')
        form.progressive_render()
        form.open()
        form.render_fields()
        form.close()
        self.assertEqual(stream.getvalue(), u'<form action="" method="post">'
                         u'<input type="text" name="a" /><br></form>')

    def test_progressive_html_written_once(self):
        """Snippets written by add_html are not repeated by render_fields"""
        stream = io.StringIO()
        form = Form(options={'render_is_submitted_field': False},
                    stream=stream)
        form.progressive_render()
        form.open()
        form.add_html(u'<p>x</p>')
        form.add_field('text', 'a')
        form.render_fields()
        form.close()
        self.assertEqual(stream.getvalue(), u'<form action="" method="post">'
                         u'<p>x</p><input type="text" name="a" /></form>')
        self.assertEqual(form.render_fields(echo=False),
                         u'<p>x</p><input type="text" name="a" />')

    def test_batch_render_echo(self):
        """Batch rendering only writes if asked to"""
        stream = io.StringIO()
        form = Form(options={'render_is_submitted_field': False},
                    stream=stream)
        rv = form.render()
        self.assertEqual(stream.getvalue(), u'')
        self.assertEqual(form.render(echo=True), rv)
        self.assertEqual(stream.getvalue(), str(rv))

    def test_isolated_variants(self):
        """Forms can use their own field type registry"""
        class ShoutField(TextField):
            pass
        registry = VariantRegistry()
        registry.register('text', ShoutField)
        form = Form(variants=registry)
        self.assertEqual(type(form.add_field('text', 'a')), ShoutField)
        self.assertEqual(type(Form().add_field('text', 'a')), TextField)


def suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(
        FormTestCase))
    return suite


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
