"""
Registry of external segment cost constructors and changepoint search algorithms,
and dispatch of built invocations to them.

The cost functions and searches are not implemented here. Callers register
one constructor per :class:`SegmentKind` with the signature
``construct(series, fixed_params) -> evaluator`` and one callable per
:class:`Algorithm`:

* single penalty: ``fn(evaluator, n)`` or ``fn(evaluator, n, pen=value)``
* range search: ``fn(evaluator, n, (low, high))``
* binary segmentation: ``fn(evaluator, n)`` or ``fn(evaluator, n, pen=value)``

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from cpmodel.enums import Algorithm, SegmentKind
from cpmodel.exceptions import BuildError, ServiceNotRegistered
from cpmodel.invocation import AlgorithmInvocation, PenaltyRange, ScalarPenalty, build
from cpmodel.markers import DistributionSpec
from cpmodel.resolver import CostFunctionDescriptor, resolve_model

log = logging.getLogger(__name__)

CostConstructor = Callable[[Any, Dict[str, Any]], Any]
SearchFn = Callable[..., Any]
Model = Union[DistributionSpec, str]


class ServiceRegistry:
    def __init__(self) -> None:
        self._costs: Dict[SegmentKind, CostConstructor] = {}
        self._searches: Dict[Algorithm, SearchFn] = {}

    def register_cost(self, kind: Union[SegmentKind, str], constructor: CostConstructor) -> None:
        self._costs[SegmentKind(kind)] = constructor

    def register_search(self, algorithm: Union[Algorithm, str], fn: SearchFn) -> None:
        self._searches[Algorithm(algorithm)] = fn

    def cost(self, kind: SegmentKind) -> CostConstructor:
        try:
            return self._costs[kind]
        except KeyError:
            raise ServiceNotRegistered(f"No segment cost constructor registered for {kind.value}") from None

    def search(self, algorithm: Algorithm) -> SearchFn:
        try:
            return self._searches[algorithm]
        except KeyError:
            raise ServiceNotRegistered(f"No search registered for {algorithm.value}") from None

    def clear(self) -> None:
        self._costs.clear()
        self._searches.clear()


registry = ServiceRegistry()


def make_evaluator(descriptor: CostFunctionDescriptor, services: Optional[ServiceRegistry] = None) -> Any:
    services = services or registry
    if descriptor.series is None:
        raise BuildError(f"{descriptor.kind.value} descriptor references no series")
    constructor = services.cost(descriptor.kind)
    return constructor(descriptor.series, dict(descriptor.fixed_params))


def execute(invocation: AlgorithmInvocation, services: Optional[ServiceRegistry] = None) -> Any:
    services = services or registry
    search = services.search(invocation.algorithm)
    evaluator = make_evaluator(invocation.descriptor, services)
    n = invocation.series_length
    penalty = invocation.penalty

    log.debug("execute: %s on %s n=%d", invocation.algorithm.value, invocation.descriptor.kind.value, n)
    if isinstance(penalty, PenaltyRange):
        return search(evaluator, n, (penalty.low, penalty.high))
    if isinstance(penalty, ScalarPenalty):
        return search(evaluator, n, pen=penalty.value)
    return search(evaluator, n)


def segment_cost(
    series: Any,
    model: Model,
    services: Optional[ServiceRegistry] = None,
    env: Optional[Mapping[str, Any]] = None,
) -> Any:
    descriptor = resolve_model(model, series=series, env=env)
    return make_evaluator(descriptor, services)


def pelt(
    series: Any,
    model: Model,
    *penalties: float,
    services: Optional[ServiceRegistry] = None,
    env: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Run the single-penalty search, or range search when given two penalties."""
    descriptor = resolve_model(model, series=series, env=env)
    invocation = build(descriptor, penalty_args=penalties, algorithm=Algorithm.single_penalty)
    return execute(invocation, services)


def binseg(
    series: Any,
    model: Model,
    *penalties: float,
    services: Optional[ServiceRegistry] = None,
    env: Optional[Mapping[str, Any]] = None,
) -> Any:
    descriptor = resolve_model(model, series=series, env=env)
    invocation = build(descriptor, penalty_args=penalties, algorithm=Algorithm.binary_segmentation)
    return execute(invocation, services)
