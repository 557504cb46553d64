"""
Resolution of distribution specifications into segment cost function descriptors,
validating arity and changing/fixed marker combinations against the rule table.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

import numpy as np

from cpmodel.enums import Family, SegmentKind
from cpmodel.exceptions import (
    ArityError,
    SpecSyntaxError,
    UnderspecifiedError,
    UnsupportedDistributionError,
)
from cpmodel.grammar import parse
from cpmodel.markers import DistributionSpec, Slot
from cpmodel.rules import DistributionRule, rule_for

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CostFunctionDescriptor:
    kind: SegmentKind
    family: Family
    fixed_params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    description: str = ""
    # the data is owned by the caller and never part of equality
    series: Optional[np.ndarray] = field(default=None, compare=False, repr=False)

    @property
    def series_length(self) -> Optional[int]:
        if self.series is None:
            return None
        return int(self.series.shape[0])

    def __hash__(self) -> int:
        return hash((self.kind, self.family, tuple(sorted(self.fixed_params.items())), self.description))


def _as_series(series: Any) -> Optional[np.ndarray]:
    if series is None:
        return None
    try:
        arr = np.asarray(series)
    except (TypeError, ValueError) as exc:
        raise SpecSyntaxError(f"Series is not a regular array: {exc}") from exc
    if arr.ndim == 0:
        raise SpecSyntaxError("Series must be a sequence, not a scalar")
    return arr


def _check_shape(rule: DistributionRule, spec: DistributionSpec) -> None:
    if rule.arity is not None and spec.arity != rule.arity:
        noun = "parameter" if rule.arity == 1 else "parameters"
        raise ArityError(
            f"{rule.family.value} distribution has {rule.arity} {noun}, got {spec.arity}"
        )
    if rule.literal and any(p.slot is Slot.changing for p in spec.parameters):
        raise SpecSyntaxError(
            f"{rule.family.value} parameters are literal values and cannot be marked as changing"
        )


def _retained_params(rule: DistributionRule, spec: DistributionSpec) -> Dict[str, Any]:
    if rule.unconditional is not None and not rule.literal:
        return {}
    return {
        name: marker.value
        for name, marker in zip(rule.parameter_names, spec.parameters)
        if marker.slot is Slot.fixed
    }


def _notify(hook: Callable[[CostFunctionDescriptor], Any], descriptor: CostFunctionDescriptor) -> None:
    try:
        hook(descriptor)
    except Exception as exc:
        log.warning("resolution hook %r failed: %s", hook, exc)


def resolve(
    spec: DistributionSpec,
    series: Any = None,
    on_resolved: Optional[Callable[[CostFunctionDescriptor], Any]] = None,
) -> CostFunctionDescriptor:
    """Resolve ``spec`` to the descriptor of its segment cost function.

    Arity is checked before the marker combination, so ``Normal(?)`` is an
    :class:`ArityError` rather than an :class:`UnderspecifiedError`. Nothing
    is returned on failure.
    """
    if not isinstance(spec, DistributionSpec):
        raise SpecSyntaxError(f"Syntax error: expected distribution as argument, got {type(spec).__name__}")

    rule = rule_for(spec.family)
    if rule is None:
        raise UnsupportedDistributionError(
            f"Distribution {spec.family} has no implemented cost functions"
        )

    _check_shape(rule, spec)

    variant = rule.variant_for(spec.pattern)
    if variant is None:
        raise UnderspecifiedError(
            f"{rule.underspecified_message} with a ? symbol, got {spec}"
        )

    descriptor = CostFunctionDescriptor(
        kind=variant.kind,
        family=rule.family,
        fixed_params=MappingProxyType(_retained_params(rule, spec)),
        description=variant.description,
        series=_as_series(series),
    )

    from config import settings
    if settings.announce_model:
        log.info("Changepoint distribution is %s", variant.description)
    if on_resolved is not None:
        _notify(on_resolved, descriptor)
    return descriptor


def resolve_model(
    model: Union[DistributionSpec, str],
    series: Any = None,
    env: Optional[Mapping[str, Any]] = None,
    on_resolved: Optional[Callable[[CostFunctionDescriptor], Any]] = None,
) -> CostFunctionDescriptor:
    spec = parse(model, env) if isinstance(model, str) else model
    return resolve(spec, series=series, on_resolved=on_resolved)
