"""
Invocation builder combining a resolved cost descriptor with a series length and
penalty arguments into a request for one of the changepoint search algorithms.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

import numpy as np

from cpmodel.enums import Algorithm
from cpmodel.exceptions import BuildError
from cpmodel.resolver import CostFunctionDescriptor

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScalarPenalty:
    value: float


@dataclass(frozen=True)
class PenaltyRange:
    low: float
    high: float


Penalty = Optional[Union[ScalarPenalty, PenaltyRange]]


@dataclass(frozen=True)
class AlgorithmInvocation:
    algorithm: Algorithm
    descriptor: CostFunctionDescriptor
    series_length: int
    penalty: Penalty = None


def _coerce_algorithm(algorithm: Union[Algorithm, str, None]) -> Algorithm:
    if algorithm is None:
        from config import settings
        algorithm = settings.default_algorithm
    if isinstance(algorithm, Algorithm):
        return algorithm
    try:
        return Algorithm(str(algorithm).strip().lower())
    except ValueError:
        raise BuildError(f"Unknown search algorithm: {algorithm!r}") from None


def _coerce_penalty(value: Any) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise BuildError(f"Penalty must be a real number, got {value!r}")
    numeric = float(value)
    if not math.isfinite(numeric) or numeric < 0.0:
        raise BuildError(f"Penalty must be finite and non-negative, got {value!r}")
    return numeric


def _coerce_length(series_length: Any, descriptor: CostFunctionDescriptor) -> int:
    referenced = descriptor.series_length
    if series_length is None:
        if referenced is None:
            raise BuildError("Series length is required when the descriptor references no series")
        series_length = referenced
    if isinstance(series_length, (bool, np.bool_)) or not isinstance(series_length, (int, np.integer)):
        raise BuildError(f"Series length must be an integer, got {series_length!r}")
    n = int(series_length)
    if n <= 0:
        raise BuildError(f"Series length must be positive, got {n}")
    if referenced is not None and n != referenced:
        raise BuildError(f"Series length {n} does not match referenced series of length {referenced}")
    return n


def _penalty_for(algorithm: Algorithm, values: Sequence[float]) -> tuple[Algorithm, Penalty]:
    if len(values) > algorithm.max_penalty_args():
        if algorithm is Algorithm.binary_segmentation:
            raise BuildError("Binary segmentation accepts at most one penalty value")
        raise BuildError(f"At most two penalty values are accepted, got {len(values)}")

    if algorithm is Algorithm.range_search and len(values) != 2:
        raise BuildError(f"Range search needs a (low, high) penalty pair, got {len(values)} value(s)")

    if len(values) == 2:
        low, high = values
        if low > high:
            raise BuildError(f"Penalty range is inverted: low={low} > high={high}")
        return Algorithm.range_search, PenaltyRange(low=low, high=high)
    if len(values) == 1:
        return algorithm, ScalarPenalty(values[0])
    return algorithm, None


def build(
    descriptor: CostFunctionDescriptor,
    series_length: Optional[int] = None,
    penalty_args: Sequence[Any] = (),
    algorithm: Union[Algorithm, str, None] = None,
) -> AlgorithmInvocation:
    """Assemble the search request for ``descriptor``.

    No penalty leaves the choice of a default to the search itself. One value
    is a scalar penalty. Two values on the single-penalty path become a
    penalty range and switch the request to range search; binary
    segmentation rejects them.
    """
    if not isinstance(descriptor, CostFunctionDescriptor):
        raise BuildError(f"Expected a resolved cost descriptor, got {type(descriptor).__name__}")

    if penalty_args is None:
        penalty_args = ()
    elif np.isscalar(penalty_args):
        raise BuildError(f"Penalty arguments must be a sequence, got {penalty_args!r}")

    requested = _coerce_algorithm(algorithm)
    n = _coerce_length(series_length, descriptor)
    values = [_coerce_penalty(v) for v in penalty_args]
    chosen, penalty = _penalty_for(requested, values)

    log.debug(
        "build: kind=%s algorithm=%s n=%d penalty=%r",
        descriptor.kind.value, chosen.value, n, penalty,
    )
    return AlgorithmInvocation(
        algorithm=chosen,
        descriptor=descriptor,
        series_length=n,
        penalty=penalty,
    )
