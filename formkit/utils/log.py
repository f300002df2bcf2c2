# -*- coding: utf-8 -*-
"""
    formkit.utils.log
    ~~~~~~~~~~~~~~~~~

    Structured logging for the toolkit.  Formkit never configures structlog
    on its own; the hosting application decides where the events go.

    :copyright: (c) 2026 by the Formkit Team, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import structlog


def get_logger(name):
    """Returns a bound structlog logger for the given module name."""
    return structlog.get_logger(name)
