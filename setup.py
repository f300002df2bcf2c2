# -*- coding: utf-8 -*-
"""
Formkit
=======

*server side HTML forms*


Formkit builds HTML forms on the server.  Fields and forms
render themselves into markup, a small rule based validator
checks the submitted values and a request handler carries
values and errors across a redirect so that a failed
submission can be redisplayed with the messages next to the
fields.

For more information have a look at the docstrings of the
`formkit.toolkit` module.
"""

# we require setuptools because of dependencies and testing.
from setuptools import setup

extra = {}
try:
    import babel
except ImportError:
    pass
else:
    extra['message_extractors'] = {
        'formkit': [
            ('**.py', 'python', None)
        ]
    }

setup(
    name='Formkit',
    version='0.1',
    license='BSD',
    author='Formkit Team',
    description='Server side HTML form toolkit',
    long_description=__doc__,
    packages=['formkit', 'formkit.i18n', 'formkit.utils', 'formkit.tests'],
    package_data={'formkit': ['default_settings.cfg']},
    zip_safe=False,
    platforms='any',
    test_suite='formkit.tests.suite',
    install_requires=[
        'Werkzeug>=2.0',
        'MarkupSafe>=2.0',
        'Babel>=2.9',
        'structlog>=21.2'
    ],
    extras_require={
        'test': [
            'lxml',
            'html5lib',
            'pytest'
        ]
    }, **extra
)
