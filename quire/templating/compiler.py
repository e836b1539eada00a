"""Compile template sources into reusable Jinja templates."""

from __future__ import annotations

import logging
import typing as typ

from jinja2 import Environment, Template, TemplateSyntaxError, select_autoescape

from quire.errors import FileError, InvalidTemplateError

from .helpers import BASE_URL_NAME, HelperResolver

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def create_environment() -> Environment:
    """Return the Jinja environment shared by every compiled template."""
    return Environment(
        autoescape=select_autoescape(["html", "xml"], default=True),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def compile_template(
    source: str,
    base_url: str,
    *,
    name: str = "<template>",
    path: Path | None = None,
    environment: Environment | None = None,
) -> Template:
    """Parse ``source``, resolve its link helpers and compile the result.

    Parameters
    ----------
    source : str
        Template text in Jinja syntax.
    base_url : str
        Prefix used when resolving ``base``, ``page``, ``post`` and ``asset``.
    name : str, optional
        Template name recorded on the compiled template.
    path : Path, optional
        Source file, used in error messages and tracebacks.
    environment : Environment, optional
        Environment to compile against; defaults to :func:`create_environment`.

    Returns
    -------
    Template
        Compiled template with ``base_url`` bound as a global.

    Raises
    ------
    InvalidTemplateError
        If the source has a syntax error or a helper call cannot be resolved.
    """
    env = environment or create_environment()
    filename = str(path) if path is not None else None
    location = filename or name
    try:
        tree = env.parse(source, name=name, filename=filename)
        tree = HelperResolver(base_url, location).visit(tree)
        code = env.compile(tree, name=name, filename=filename)
    except TemplateSyntaxError as exc:
        message = exc.message or str(exc)
        raise InvalidTemplateError(message, location, exc.lineno) from exc
    template_globals = env.make_globals({BASE_URL_NAME: base_url})
    return env.template_class.from_code(env, code, template_globals)


def compile_template_file(
    path: Path,
    base_url: str,
    *,
    name: str | None = None,
    environment: Environment | None = None,
) -> Template:
    """Read and compile the template stored at ``path``.

    Raises
    ------
    FileError
        If the file cannot be read.
    InvalidTemplateError
        If the template cannot be compiled.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileError.from_os_error(exc, path) from exc
    except UnicodeDecodeError as exc:
        raise InvalidTemplateError(str(exc), path, 0) from exc
    logger.debug("Compiling template %s", path)
    return compile_template(
        source,
        base_url,
        name=name or path.name,
        path=path,
        environment=environment,
    )


__all__ = ["compile_template", "compile_template_file", "create_environment"]
