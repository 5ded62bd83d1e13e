"""Selection of solids by 1-based index or full hierarchical name."""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Optional, Sequence

from . import config
from .errors import IndexOutOfRangeError, InvalidIndexError, SolidNotFoundError
from .shape_tree import NamedSolid

# Leading integer; anything after it is ignored ("2abc" is 2)
_INDEX_PATTERN = re.compile(r"\s*([+-]?\d+)")


def parse_selection(values: Optional[Iterable[str]]) -> List[str]:
    """Split one or more comma separated option values into tokens.

    Empty tokens are kept; ``select`` skips them.
    """
    tokens: List[str] = []
    for value in values or ():
        tokens.extend(value.split(config.SELECT_SEPARATOR))
    return tokens


def parse_index(token: str) -> int:
    match = _INDEX_PATTERN.match(token)
    if match is None:
        raise InvalidIndexError(f"Invalid index: {token}")
    return int(match.group(1))


def find_by_name(named: Sequence[NamedSolid], name: str) -> NamedSolid:
    for named_solid in named:
        if named_solid.name == name:
            return named_solid
    raise SolidNotFoundError(f"Could not find solid with name '{name}'")


def find_by_index(named: Sequence[NamedSolid], token: str) -> NamedSolid:
    index = parse_index(token)
    if index < 1 or index > len(named):
        raise IndexOutOfRangeError(f"Index out of range: {token}")
    return named[index - 1]


def select(named: Sequence[NamedSolid], tokens: Sequence[str]) -> List[Any]:
    """Return the solids picked by ``tokens``, in token order.

    No tokens selects everything. A token starting with the path separator is
    matched against full names, any other token is a 1-based index. Repeated
    tokens select the same solid repeatedly.
    """
    if not tokens:
        return [named_solid.solid for named_solid in named]

    solids: List[Any] = []
    for token in tokens:
        if not token:
            continue
        if token.startswith(config.PATH_SEPARATOR):
            solids.append(find_by_name(named, token).solid)
        else:
            solids.append(find_by_index(named, token).solid)
    return solids
