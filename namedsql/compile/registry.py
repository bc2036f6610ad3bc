"""Positional marker styles known to ``compile_sql``.

Each style is a :class:`~namedsql.compile.base.PlaceholderCompiler` keyed by
its own ``dialect_name``.  The built-in styles (``postgres`` -> ``$1``,
``sqlite`` -> ``?1``) are registered when :mod:`namedsql.compile` is
imported.  Additional styles register the same way::

    from namedsql.compile.registry import register_marker_style

    @register_marker_style
    class OracleCompiler(PlaceholderCompiler):
        dialect_name = "oracle"

        def positional_marker(self, index: int) -> str:
            return f":{index}"
"""

from __future__ import annotations

from namedsql.compile.base import PlaceholderCompiler
from namedsql.errors import CompilationError

_STYLES: dict[str, PlaceholderCompiler] = {}


def register_marker_style(compiler_cls: type[PlaceholderCompiler]) -> type[PlaceholderCompiler]:
    """Register ``compiler_cls`` under its ``dialect_name``; usable as a decorator.

    Compilers are stateless, so one shared instance serves every call.
    A later registration with the same name replaces the earlier one.
    """
    compiler = compiler_cls()
    _STYLES[compiler.dialect_name] = compiler
    return compiler_cls


def unregister_marker_style(name: str) -> None:
    """Forget the style registered as ``name``; unknown names are ignored."""
    _STYLES.pop(name, None)


def compiler_for(target: str) -> PlaceholderCompiler:
    """Return the compiler rendering markers for ``target``.

    Raises:
        CompilationError: If no marker style is registered as ``target``.
    """
    try:
        return _STYLES[target]
    except KeyError:
        known = ", ".join(f"{name} ({marker})" for name, marker in marker_styles().items())
        raise CompilationError(
            f"named_sql: no positional marker style for target {target!r}; "
            f"known styles: {known or 'none'}"
        ) from None


def marker_styles() -> dict[str, str]:
    """Map each registered target to the marker it renders for index 1."""
    return {name: _STYLES[name].positional_marker(1) for name in sorted(_STYLES)}
