"""Resolve ``base``/``page``/``post``/``asset`` link helpers in a template AST.

Templates build links with four helper calls::

    <a href="{{ page('about') }}">About</a>
    <link rel="stylesheet" href="{{ asset('css/site.css') }}">

The calls are rewritten into string constants when the template is compiled,
so rendering never repeats the concatenation and a bad helper call fails
before any output is written. Arguments must be string literals, optionally
joined with ``~`` or ``+``.
"""

from __future__ import annotations

import typing as typ

from jinja2 import nodes
from jinja2.visitor import NodeTransformer

from quire.errors import InvalidTemplateError

BASE_URL_NAME = "base_url"
LINK_FORMATS: dict[str, str] = {
    "base": "{base}{path}",
    "page": "{base}{path}.html",
    "post": "{base}posts/{path}.html",
    "asset": "{base}assets/{path}",
}
HELPER_NAMES = frozenset(LINK_FORMATS)


def link_for(helper: str, base_url: str, path: str) -> str:
    """Return the URL produced by ``helper(path)`` for ``base_url``.

    Examples
    --------
    >>> link_for("post", "/blog/", "hello-world")
    '/blog/posts/hello-world.html'
    >>> link_for("asset", "/", "css/site.css")
    '/assets/css/site.css'
    """
    return LINK_FORMATS[helper].format(base=base_url, path=path)


class _NotConstantError(Exception):
    """Raised when an expression cannot be evaluated at compile time."""

    def __init__(self, node: nodes.Node) -> None:
        super().__init__(type(node).__name__)
        self.node = node


def evaluate_constant(node: nodes.Node) -> str:
    """Evaluate a string literal expression, or raise ``_NotConstantError``."""
    match node:
        case nodes.Const(value=str() as value):
            return value
        case nodes.Concat(nodes=parts):
            return "".join(evaluate_constant(part) for part in parts)
        case nodes.Add(left=left, right=right):
            return evaluate_constant(left) + evaluate_constant(right)
        case _:
            raise _NotConstantError(node)


class HelperResolver(NodeTransformer):
    """Rewrite link helper calls bottom-up into constants.

    ``base()`` without an argument becomes a lookup of ``base_url``, which the
    compiled template binds as a global. Every other node is left untouched,
    including bare helper names that are not called.
    """

    def __init__(self, base_url: str, path: str) -> None:
        self.base_url = base_url
        self.path = path

    def visit_Call(self, node: nodes.Call) -> nodes.Node:  # noqa: N802
        """Resolve ``node`` after its arguments have been rewritten."""
        node = typ.cast("nodes.Call", self.generic_visit(node))
        callee = node.node
        if not isinstance(callee, nodes.Name) or callee.name not in HELPER_NAMES:
            return node

        helper = callee.name
        if node.kwargs or node.dyn_args or node.dyn_kwargs or len(node.args) > 1:
            msg = f"{helper}() accepts a single positional argument"
            raise self._error(node, msg)
        if not node.args:
            if helper == "base":
                return nodes.Name(BASE_URL_NAME, "load", lineno=node.lineno)
            msg = f"{helper}() requires an argument"
            raise self._error(node, msg)

        try:
            argument = evaluate_constant(node.args[0])
        except _NotConstantError as exc:
            msg = (
                f"argument of {helper}() must be a string literal, "
                f"got {exc.node.__class__.__name__}"
            )
            raise self._error(node, msg) from exc
        return nodes.Const(link_for(helper, self.base_url, argument), lineno=node.lineno)

    def _error(self, node: nodes.Node, message: str) -> InvalidTemplateError:
        return InvalidTemplateError(message, self.path, node.lineno)


__all__ = [
    "BASE_URL_NAME",
    "HELPER_NAMES",
    "LINK_FORMATS",
    "HelperResolver",
    "evaluate_constant",
    "link_for",
]
