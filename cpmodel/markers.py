"""
Parameter markers and distribution specifications for changepoint models.

A changepoint model names a distribution family and marks each positional
parameter as either fixed (carrying a value used as-is by the segment cost)
or changing (estimated independently on every segment).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Tuple, Union

from cpmodel.enums import Family


class Slot(str, Enum):
    changing = "changing"
    fixed = "fixed"


@dataclass(frozen=True)
class Fixed:
    value: Any

    @property
    def slot(self) -> Slot:
        return Slot.fixed

    def __repr__(self) -> str:
        return f"Fixed({self.value!r})"


@dataclass(frozen=True)
class Changing:

    @property
    def slot(self) -> Slot:
        return Slot.changing

    def __repr__(self) -> str:
        return "?"


CHANGING = Changing()

ParameterMarker = Union[Fixed, Changing]


def as_marker(value: Any) -> ParameterMarker:
    if isinstance(value, (Fixed, Changing)):
        return value
    return Fixed(value)


@dataclass(frozen=True)
class DistributionSpec:
    family: Union[Family, str]
    parameters: Tuple[ParameterMarker, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        family = self.family.value if isinstance(self.family, Family) else self.family
        object.__setattr__(self, "family", family)
        object.__setattr__(self, "parameters", tuple(as_marker(p) for p in self.parameters))

    @classmethod
    def of(cls, family: Union[Family, str], *parameters: Any) -> DistributionSpec:
        return cls(family, tuple(parameters))

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def pattern(self) -> Tuple[Slot, ...]:
        return tuple(p.slot for p in self.parameters)

    def __str__(self) -> str:
        args = ", ".join("?" if p.slot is Slot.changing else repr(p.value) for p in self.parameters)
        return f"{self.family}({args})"
