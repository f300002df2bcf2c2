# -*- coding: utf-8 -*-
"""
    formkit
    ~~~~~~~

    Formkit builds HTML forms on the server side.  Fields and forms render
    themselves into markup, submitted values and validation errors are fed
    back into the fields so that a form can be redisplayed after a failed
    submission.  The shortcuts in :mod:`formkit.toolkit` are the usual entry
    point.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
# note on imports: this file must not import anything so that importing
# the package does not load the settings.
