"""
Variable substitution for ``{{name}}`` placeholders.

Every piece of markup produced by the templating package is interpolated
through :func:`substitute`. Values are inserted as-is: nothing is escaped
unless the caller passes an ``escape`` callable.
"""
import re
from typing import Callable, Mapping, Optional

TOKEN_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def substitute(
    template: str,
    values: Mapping[str, object],
    escape: Optional[Callable[[str], str]] = None,
) -> str:
    """Replace every known ``{{token}}`` in *template*.

    Args:
        template: Text containing placeholders.
        values: Token name -> replacement. ``None`` becomes an empty string.
        escape: Optional transform applied to each replacement value.

    Returns:
        New string. Unknown tokens are left verbatim; replacement text is not
        scanned again, so values may safely contain ``{{...}}``.
    """
    def _replace(match: "re.Match") -> str:
        name = match.group(1)
        if name not in values:
            return match.group(0)
        value = values[name]
        text = "" if value is None else str(value)
        return escape(text) if escape else text

    return TOKEN_RE.sub(_replace, template)


def find_tokens(template: str) -> set:
    """Names of all placeholders present in *template*."""
    return {m.group(1) for m in TOKEN_RE.finditer(template)}
