"""
Parser for the textual changepoint model notation, e.g. ``Normal(?, 2.0)``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional

from cpmodel.exceptions import SpecSyntaxError
from cpmodel.markers import CHANGING, DistributionSpec, Fixed, ParameterMarker, as_marker
from cpmodel.rules import rule_for

_CALL_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*(?:\((.*)\))?\s*$", re.DOTALL)
_KEYWORD_RE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$", re.DOTALL)
_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")


def _changing_token() -> str:
    from config import settings
    return settings.changing_token


def _split_args(body: str) -> List[str]:
    if "(" in body or ")" in body:
        raise SpecSyntaxError(f"Nested or unbalanced parentheses in arguments: {body!r}")
    if not body.strip():
        return []
    return [part.strip() for part in body.split(",")]


def _parse_value(token: str, env: Mapping[str, Any]) -> ParameterMarker:
    if token == _changing_token():
        return CHANGING
    if _INT_RE.match(token):
        return Fixed(int(token))
    if _FLOAT_RE.match(token):
        return Fixed(float(token))
    if _IDENT_RE.match(token):
        if token not in env:
            raise SpecSyntaxError(f"Unknown name {token!r} in model expression")
        return as_marker(env[token])
    raise SpecSyntaxError(f"Cannot parse parameter {token!r}")


def parse(text: str, env: Optional[Mapping[str, Any]] = None) -> DistributionSpec:
    """Parse ``Family(arg, ...)`` into a :class:`DistributionSpec`.

    Arguments are the changing token (``?`` by default), numeric literals, or
    names looked up in ``env``. A ``name=value`` argument is accepted when
    ``name`` is the family's parameter at that position; families with a
    notational parameter list accept any name. Unknown families are
    parsed as-is and left for the resolver to reject.
    """
    if not isinstance(text, str):
        raise SpecSyntaxError(f"Expected distribution expression as text, got {type(text).__name__}")
    m = _CALL_RE.match(text)
    if not m:
        raise SpecSyntaxError(f"Syntax error: expected distribution call, got {text!r}")

    family, body = m.group(1), m.group(2)
    env = env or {}
    rule = rule_for(family)

    parameters: List[ParameterMarker] = []
    for position, raw in enumerate(_split_args(body or "")):
        if not raw:
            raise SpecSyntaxError(f"Empty argument at position {position} in {text!r}")
        kw = _KEYWORD_RE.match(raw)
        if kw:
            name, raw = kw.group(1), kw.group(2).strip()
            # names are only checked where the parameter count is
            checked = rule is not None and rule.arity is not None
            if checked and name != rule.parameter_name(position):
                raise SpecSyntaxError(
                    f"{family} has no parameter {name!r} at position {position}"
                )
            if not raw:
                raise SpecSyntaxError(f"Missing value for {name!r} in {text!r}")
        parameters.append(_parse_value(raw, env))

    return DistributionSpec(family, tuple(parameters))
