"""Directive model and annotation parser.

Annotation grammar: ``name[,key=value]*``. Tokens are separated by a literal
comma; each parameter token splits on its first ``=``. Whitespace around
names, keys and values is trimmed.

The parser only checks shape. Which keys a directive needs is decided by the
dispatcher, because required parameters differ per directive.

Examples:
    >>> parse_directive("range,min=4,max=6")
    Directive(name='range', params=(('min', '4'), ('max', '6')))
    >>> str(parse_directive(" regex , pattern = ^a=b$ "))
    'regex,pattern=^a=b$'
"""

from __future__ import annotations

from dataclasses import dataclass

from avowed.domain.errors import EmptyDirective, MalformedParameter

DIRECTIVE_DELIMITER = ","
PARAM_SEPARATOR = "="


@dataclass(frozen=True)
class Directive:
    """A named validation rule with its raw string parameters, in annotation order."""

    name: str
    params: tuple[tuple[str, str], ...] = ()

    def keys(self) -> list[str]:
        """Parameter keys in annotation order (duplicates preserved)."""
        return [key for key, _ in self.params]

    def get(self, key: str) -> str | None:
        """Return the raw value of the first parameter named *key*."""
        for k, v in self.params:
            if k == key:
                return v
        return None

    def as_dict(self) -> dict[str, str]:
        return dict(self.params)

    def __str__(self) -> str:
        parts = [self.name, *(f"{k}{PARAM_SEPARATOR}{v}" for k, v in self.params)]
        return DIRECTIVE_DELIMITER.join(parts)


def split_param(token: str) -> tuple[str, str]:
    """Split one ``key=value`` token on the first ``=``.

    Raises:
        MalformedParameter: No separator, or an empty side after trimming.
    """
    key, sep, value = token.partition(PARAM_SEPARATOR)
    key, value = key.strip(), value.strip()
    if not sep or not key or not value:
        raise MalformedParameter(token)
    return key, value


def parse_directive(annotation: str) -> Directive:
    """Parse an annotation string into a :class:`Directive`.

    Raises:
        EmptyDirective: The directive name is empty after trimming.
        MalformedParameter: A parameter token is not a well-formed ``key=value``.
    """
    head, *tokens = annotation.split(DIRECTIVE_DELIMITER)
    name = head.strip()
    if not name:
        raise EmptyDirective(annotation)
    return Directive(name=name, params=tuple(split_param(t) for t in tokens))
