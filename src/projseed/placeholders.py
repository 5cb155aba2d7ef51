"""Literal placeholder substitution for template text members.

Only two tokens are recognized:

    {{name}}        the project name, verbatim
    {{camel_name}}  the project name in UpperCamelCase

Replacement is plain string replacement: no escaping, no nesting, and no
error when a token does not occur.
"""

from dataclasses import dataclass

NAME_TOKEN = "{{name}}"
CAMEL_NAME_TOKEN = "{{camel_name}}"


def _split_words(value: str) -> list[str]:
    """Split on non-alphanumerics and at lower-to-upper or acronym boundaries.

    Character classes come from str.isalnum/isupper/islower, so letters
    outside ASCII stay part of their word.
    """
    words = []
    current = ""
    for index, char in enumerate(value):
        if not char.isalnum():
            if current:
                words.append(current)
                current = ""
            continue
        if current and char.isupper():
            previous = current[-1]
            following = value[index + 1:index + 2]
            if not previous.isupper() or following.islower():
                words.append(current)
                current = ""
        current += char
    if current:
        words.append(current)
    return words


def to_upper_camel_case(value: str) -> str:
    """Convert ``my-cool_thing`` or ``myCoolThing`` to ``MyCoolThing``."""
    words = _split_words(value)
    return "".join(word.capitalize() for word in words if word)


@dataclass(frozen=True)
class SubstitutionMap:
    """The placeholder values derived from a project name."""

    name: str
    camel_name: str

    @classmethod
    def for_name(cls, project_name: str) -> "SubstitutionMap":
        return cls(name=project_name, camel_name=to_upper_camel_case(project_name))

    def apply(self, text: str) -> str:
        text = text.replace(NAME_TOKEN, self.name)
        return text.replace(CAMEL_NAME_TOKEN, self.camel_name)


def substitute(text: str, project_name: str) -> str:
    """Replace ``{{name}}`` then ``{{camel_name}}`` in *text*."""
    return SubstitutionMap.for_name(project_name).apply(text)
