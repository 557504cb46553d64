"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, model_serializer

from cpmodel import AlgorithmInvocation, CostFunctionDescriptor, PenaltyRange, ScalarPenalty
from cpmodel.enums import Algorithm, Family, SegmentKind
from cpmodel.rules import DistributionRule


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class DescriptorView(NpModel):

    kind: SegmentKind
    family: Family
    fixed_params: Dict[str, Any]
    description: str
    series_length: Optional[int] = None

    @classmethod
    def from_descriptor(cls, descriptor: CostFunctionDescriptor) -> DescriptorView:
        return cls(
            kind=descriptor.kind,
            family=descriptor.family,
            fixed_params=dict(descriptor.fixed_params),
            description=descriptor.description,
            series_length=descriptor.series_length,
        )


class PenaltyView(BaseModel):

    type: str
    value: Optional[float] = None
    low: Optional[float] = None
    high: Optional[float] = None


class InvocationView(NpModel):

    algorithm: Algorithm
    descriptor: DescriptorView
    series_length: int
    penalty: Optional[PenaltyView] = None

    @classmethod
    def from_invocation(cls, invocation: AlgorithmInvocation) -> InvocationView:
        penalty: Optional[PenaltyView] = None
        if isinstance(invocation.penalty, ScalarPenalty):
            penalty = PenaltyView(type="scalar", value=invocation.penalty.value)
        elif isinstance(invocation.penalty, PenaltyRange):
            penalty = PenaltyView(type="range", low=invocation.penalty.low, high=invocation.penalty.high)
        return cls(
            algorithm=invocation.algorithm,
            descriptor=DescriptorView.from_descriptor(invocation.descriptor),
            series_length=invocation.series_length,
            penalty=penalty,
        )


class RuleView(BaseModel):

    family: Family
    parameters: List[str]
    arity: Optional[int]
    variants: List[Tuple[List[str], SegmentKind, str]]

    @classmethod
    def from_rule(cls, rule: DistributionRule) -> RuleView:
        if rule.unconditional is not None:
            variants = [([], rule.unconditional.kind, rule.unconditional.description)]
        else:
            variants = [
                ([slot.value for slot in pattern], variant.kind, variant.description)
                for pattern, variant in rule.variants.items()
            ]
        return cls(
            family=rule.family,
            parameters=list(rule.parameter_names),
            arity=rule.arity,
            variants=variants,
        )
