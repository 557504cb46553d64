"""
Rule table mapping distribution families and marker patterns to segment cost kinds.

Each supported family is described by one :class:`DistributionRule` record.
Resolution is a lookup of ``(family, marker pattern)`` in this table, so
supporting a new distribution means adding a record here rather than another
branch in the resolver.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from cpmodel.enums import Family, SegmentKind
from cpmodel.markers import Slot

C = Slot.changing
F = Slot.fixed

Pattern = Tuple[Slot, ...]


@dataclass(frozen=True)
class Variant:
    kind: SegmentKind
    description: str


@dataclass(frozen=True)
class DistributionRule:
    family: Family
    parameter_names: Tuple[str, ...] = ()
    # None means the parameter count is notational and never checked
    arity: Optional[int] = None
    variants: Mapping[Pattern, Variant] = field(default_factory=dict)
    unconditional: Optional[Variant] = None
    # parameters are auxiliary literals handed straight to the cost constructor
    literal: bool = False
    underspecified_message: str = ""

    def variant_for(self, pattern: Pattern) -> Optional[Variant]:
        if self.unconditional is not None:
            return self.unconditional
        return self.variants.get(pattern)

    def parameter_name(self, position: int) -> Optional[str]:
        if 0 <= position < len(self.parameter_names):
            return self.parameter_names[position]
        return None


def _rule(**kwargs) -> DistributionRule:
    variants = kwargs.pop("variants", {})
    return DistributionRule(variants=MappingProxyType(dict(variants)), **kwargs)


RULES: Tuple[DistributionRule, ...] = (
    _rule(
        family=Family.normal,
        parameter_names=("mu", "sigma"),
        arity=2,
        variants={
            (C, F): Variant(
                SegmentKind.normal_mean,
                "Normal with changing mean and fixed variance",
            ),
            (F, C): Variant(
                SegmentKind.normal_var,
                "Normal with fixed mean and changing variance",
            ),
            (C, C): Variant(
                SegmentKind.normal_meanvar,
                "Normal with changing mean and changing variance",
            ),
        },
        underspecified_message="Must mark at least one Normal parameter as changing",
    ),
    _rule(
        family=Family.exponential,
        parameter_names=("mean",),
        unconditional=Variant(SegmentKind.exponential, "Exponential with changing mean"),
    ),
    _rule(
        family=Family.poisson,
        parameter_names=("mean",),
        unconditional=Variant(SegmentKind.poisson, "Poisson with changing mean"),
    ),
    _rule(
        family=Family.gamma,
        parameter_names=("shape", "rate"),
        arity=2,
        variants={
            (C, F): Variant(
                SegmentKind.gamma_shape,
                "Gamma with changing shape and fixed rate",
            ),
            (F, C): Variant(
                SegmentKind.gamma_rate,
                "Gamma with fixed shape and changing rate",
            ),
        },
        underspecified_message="Must mark exactly one Gamma parameter as changing",
    ),
    _rule(
        family=Family.nonparametric,
        parameter_names=("K",),
        arity=1,
        literal=True,
        unconditional=Variant(SegmentKind.nonparametric, "Nonparametric"),
    ),
    _rule(
        family=Family.ols,
        arity=0,
        unconditional=Variant(SegmentKind.ols, "piecewise linear regression (OLS)"),
    ),
)

_BY_FAMILY: Dict[Family, DistributionRule] = {rule.family: rule for rule in RULES}


def rule_for(family: object) -> Optional[DistributionRule]:
    resolved = Family.lookup(family)
    if resolved is None:
        return None
    return _BY_FAMILY.get(resolved)


def supported_families() -> Tuple[str, ...]:
    return tuple(rule.family.value for rule in RULES)
