"""Compile page templates with their link helpers resolved ahead of rendering."""

from .compiler import compile_template, compile_template_file, create_environment
from .helpers import BASE_URL_NAME, HELPER_NAMES, HelperResolver, link_for

__all__ = [
    "BASE_URL_NAME",
    "HELPER_NAMES",
    "HelperResolver",
    "compile_template",
    "compile_template_file",
    "create_environment",
    "link_for",
]
