"""
Changepoint model resolver: distribution specs, cost descriptors and search invocations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from cpmodel.enums import Algorithm, Family, SegmentKind
from cpmodel.exceptions import (
    ArityError,
    BuildError,
    ModelError,
    ResolutionError,
    ServiceNotRegistered,
    SpecSyntaxError,
    UnderspecifiedError,
    UnsupportedDistributionError,
)
from cpmodel.markers import CHANGING, Changing, DistributionSpec, Fixed
from cpmodel.grammar import parse
from cpmodel.resolver import CostFunctionDescriptor, resolve, resolve_model
from cpmodel.invocation import AlgorithmInvocation, PenaltyRange, ScalarPenalty, build
from cpmodel.dispatch import ServiceRegistry, binseg, execute, pelt, registry, segment_cost

__all__ = [
    "Algorithm",
    "Family",
    "SegmentKind",
    "ArityError",
    "BuildError",
    "ModelError",
    "ResolutionError",
    "ServiceNotRegistered",
    "SpecSyntaxError",
    "UnderspecifiedError",
    "UnsupportedDistributionError",
    "CHANGING",
    "Changing",
    "DistributionSpec",
    "Fixed",
    "parse",
    "CostFunctionDescriptor",
    "resolve",
    "resolve_model",
    "AlgorithmInvocation",
    "PenaltyRange",
    "ScalarPenalty",
    "build",
    "ServiceRegistry",
    "binseg",
    "execute",
    "pelt",
    "registry",
    "segment_cost",
]
