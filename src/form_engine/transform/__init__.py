"""
Data transformation: path access, sanitizing and JSON value helpers.
"""

from form_engine.transform import path_resolver
from form_engine.transform.sanitizer import coerce_value, sanitize_form_data

__all__ = [
    "path_resolver",
    "coerce_value",
    "sanitize_form_data",
]
