# -*- coding: utf-8 -*-
"""
    formkit.utils
    ~~~~~~~~~~~~~

    Helpers that don't depend on the settings.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
