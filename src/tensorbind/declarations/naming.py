"""Exported-name assignment for overloaded declarations."""
from __future__ import annotations

import keyword
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

from tensorbind.core import FunctionDecl

# Names the generated wrapper module cannot use as identifiers.
KEYWORD_ESCAPES = frozenset(keyword.kwlist)


def escape_name(name: str) -> str:
    """Lowercase ``name`` and append ``_`` when it is a reserved word."""

    lowered = name.lower()
    if lowered in KEYWORD_ESCAPES:
        return f"{lowered}_"
    return lowered


def assign_exported_names(decls: Iterable[FunctionDecl]) -> Mapping[str, FunctionDecl]:
    """Give every declaration a unique exported name.

    Declarations are grouped by their escaped lowercase name. Groups are
    visited alphabetically; a single-member group keeps the bare name while
    larger groups number their members from 1 in input order and never emit
    the bare name.
    """

    groups: Dict[str, List[FunctionDecl]] = {}
    for decl in decls:
        groups.setdefault(escape_name(decl.name), []).append(decl)

    taken = {name for name, members in groups.items() if len(members) == 1}
    exported: Dict[str, FunctionDecl] = {}
    for base in sorted(groups):
        members = groups[base]
        if len(members) == 1:
            exported[base] = members[0]
            continue
        for index, decl in enumerate(members, start=1):
            candidate = _numbered(base, index, taken)
            taken.add(candidate)
            exported[candidate] = decl
    return MappingProxyType(dict(sorted(exported.items())))


def _numbered(base: str, index: int, taken: set[str]) -> str:
    candidate = f"{base}{index}"
    separator = "_"
    while candidate in taken:
        candidate = f"{base}{separator}{index}"
        separator += "_"
    return candidate
