"""Name case derivation.

Every identifier and file name in a generation batch comes from a single
:class:`NameVariations` instance computed here.  Derivation is a pure
function of the normalised word sequence, so feeding any of the outputs
back in yields the same set of casings.

Word boundaries are hyphen/underscore/whitespace runs and lowercase (or
digit) to uppercase transitions.  Runs of capitals are *not* split, so
``"HTTPServer"`` is a single word.  Changing that would change the casing
of identifiers already generated by earlier releases.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict

FileCase = Literal["kebab", "camel", "pascal"]

_SEPARATORS = re.compile(r"[-_\s]+")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


class NameVariations(BaseModel):
    """Every casing of one input name."""

    model_config = ConfigDict(frozen=True)

    original: str
    kebab: str
    camel: str
    pascal: str
    snake: str
    screaming_snake: str


def split_words(name: str) -> list[str]:
    """Normalise *name* to a list of lowercase words.

    Examples::

        split_words("object-storage") -> ["object", "storage"]
        split_words("S3Storage")      -> ["s3", "storage"]
        split_words("HTTPServer")     -> ["httpserver"]
    """
    spaced = _CASE_BOUNDARY.sub(r"\1 \2", name)
    return [word.lower() for word in _SEPARATORS.split(spaced) if word]


def to_kebab(name: str) -> str:
    return "-".join(split_words(name))


def to_snake(name: str) -> str:
    return "_".join(split_words(name))


def to_screaming_snake(name: str) -> str:
    return to_snake(name).upper()


def to_pascal(name: str) -> str:
    return "".join(word[0].upper() + word[1:] for word in split_words(name))


def to_camel(name: str) -> str:
    pascal = to_pascal(name)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def name_variations(name: str) -> NameVariations:
    """Derive every casing of *name* from one word split."""
    words = split_words(name)
    pascal = "".join(word[0].upper() + word[1:] for word in words)
    return NameVariations(
        original=name,
        kebab="-".join(words),
        camel=pascal[:1].lower() + pascal[1:],
        pascal=pascal,
        snake="_".join(words),
        screaming_snake="_".join(words).upper(),
    )


def file_name(names: NameVariations, file_case: FileCase = "kebab") -> str:
    """Return the casing used for artifact directories and file names."""
    if file_case == "camel":
        return names.camel
    if file_case == "pascal":
        return names.pascal
    return names.kebab
