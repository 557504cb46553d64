"""
Enumerations for Distribution Families, Segment Cost Kinds, and Search Algorithms

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Family(str, Enum):
    normal = "Normal"
    exponential = "Exponential"
    poisson = "Poisson"
    gamma = "Gamma"
    nonparametric = "Nonparametric"
    ols = "OLS"

    @classmethod
    def lookup(cls, name: object) -> Optional[Family]:
        if isinstance(name, Family):
            return name
        if isinstance(name, str):
            return cls._value2member_map_.get(name.strip())  # type: ignore[return-value]
        return None


class SegmentKind(str, Enum):
    normal_mean = "NormalMeanSegment"
    normal_var = "NormalVarSegment"
    normal_meanvar = "NormalMeanVarSegment"
    exponential = "ExponentialSegment"
    poisson = "PoissonSegment"
    gamma_shape = "GammaShapeSegment"
    gamma_rate = "GammaRateSegment"
    nonparametric = "NonparametricSegment"
    ols = "OLSSegment"


class Algorithm(str, Enum):
    single_penalty = "single_penalty"
    range_search = "range_search"
    binary_segmentation = "binary_segmentation"

    def max_penalty_args(self) -> int:
        return 1 if self is Algorithm.binary_segmentation else 2
