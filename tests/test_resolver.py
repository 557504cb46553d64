"""
Test cases for resolving distribution specs into segment cost descriptors,
including every admissible marker combination, the error taxonomy, arity
precedence, idempotence and the informational announcement.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

import numpy as np
import pytest

from config import settings
from cpmodel.enums import Family, SegmentKind
from cpmodel.exceptions import (
    ArityError,
    ResolutionError,
    SpecSyntaxError,
    UnderspecifiedError,
    UnsupportedDistributionError,
)
from cpmodel.markers import CHANGING, DistributionSpec, Fixed
from cpmodel.resolver import resolve, resolve_model

spec = DistributionSpec.of


@pytest.mark.parametrize(
    "model, kind, fixed",
    [
        (spec("Normal", CHANGING, Fixed(2.0)), SegmentKind.normal_mean, {"sigma": 2.0}),
        (spec("Normal", Fixed(0.0), CHANGING), SegmentKind.normal_var, {"mu": 0.0}),
        (spec("Normal", CHANGING, CHANGING), SegmentKind.normal_meanvar, {}),
        (spec("Exponential", CHANGING), SegmentKind.exponential, {}),
        (spec("Poisson", CHANGING), SegmentKind.poisson, {}),
        (spec("Gamma", CHANGING, Fixed(1.0)), SegmentKind.gamma_shape, {"rate": 1.0}),
        (spec("Gamma", Fixed(2.0), CHANGING), SegmentKind.gamma_rate, {"shape": 2.0}),
        (spec("Nonparametric", 5), SegmentKind.nonparametric, {"K": 5}),
        (spec("OLS"), SegmentKind.ols, {}),
    ],
)
def test_resolves_documented_kind(model, kind, fixed):
    descriptor = resolve(model)
    assert descriptor.kind is kind
    assert dict(descriptor.fixed_params) == fixed
    assert descriptor.family is Family.lookup(model.family)


def test_normal_all_fixed_is_underspecified():
    with pytest.raises(UnderspecifiedError, match="at least one Normal parameter"):
        resolve(spec("Normal", Fixed(0.0), Fixed(1.0)))


@pytest.mark.parametrize(
    "model",
    [spec("Gamma", CHANGING, CHANGING), spec("Gamma", Fixed(1.0), Fixed(2.0))],
)
def test_gamma_needs_exactly_one_changing(model):
    with pytest.raises(UnderspecifiedError, match="exactly one Gamma parameter"):
        resolve(model)


@pytest.mark.parametrize(
    "model",
    [
        spec("Normal", CHANGING),
        spec("Normal", CHANGING, CHANGING, CHANGING),
        spec("Gamma", CHANGING),
        spec("Gamma"),
    ],
)
def test_wrong_parameter_count_is_arity_error(model):
    with pytest.raises(ArityError):
        resolve(model)


def test_arity_checked_before_markers():
    # all-fixed would be underspecified, but the count is wrong first
    with pytest.raises(ArityError):
        resolve(spec("Normal", Fixed(0.0), Fixed(1.0), Fixed(2.0)))


def test_unsupported_family():
    with pytest.raises(UnsupportedDistributionError, match="Weibull"):
        resolve(spec("Weibull", CHANGING))


def test_exponential_and_poisson_markers_are_notational():
    assert resolve(spec("Exponential", Fixed(3.0))).kind is SegmentKind.exponential
    assert resolve(spec("Poisson")).kind is SegmentKind.poisson
    assert dict(resolve(spec("Poisson", Fixed(3.0), CHANGING)).fixed_params) == {}


def test_nonparametric_and_ols_shapes():
    with pytest.raises(ArityError):
        resolve(spec("Nonparametric"))
    with pytest.raises(ArityError):
        resolve(spec("OLS", CHANGING))
    with pytest.raises(SpecSyntaxError):
        resolve(spec("Nonparametric", CHANGING))


def test_errors_share_base_class():
    for exc in (SpecSyntaxError, ArityError, UnderspecifiedError, UnsupportedDistributionError):
        assert issubclass(exc, ResolutionError)


def test_non_spec_input_is_syntax_error():
    with pytest.raises(SpecSyntaxError):
        resolve("Normal(?, 1.0)")


def test_resolution_is_idempotent():
    model = spec("Normal", CHANGING, Fixed(2.0))
    assert resolve(model) == resolve(model)


def test_fixed_params_are_read_only():
    descriptor = resolve(spec("Normal", CHANGING, Fixed(2.0)))
    with pytest.raises(TypeError):
        descriptor.fixed_params["sigma"] = 3.0


def test_series_is_attached_but_not_compared():
    model = spec("Poisson", CHANGING)
    with_data = resolve(model, series=[1, 2, 3, 4])
    assert with_data.series_length == 4
    assert isinstance(with_data.series, np.ndarray)
    assert resolve(model).series_length is None
    assert with_data == resolve(model, series=[9, 9])


def test_scalar_series_is_rejected():
    with pytest.raises(SpecSyntaxError):
        resolve(spec("Poisson", CHANGING), series=3.0)


def test_resolve_model_accepts_text():
    descriptor = resolve_model("Gamma(?, beta)", env={"beta": 1.0})
    assert descriptor.kind is SegmentKind.gamma_shape
    assert dict(descriptor.fixed_params) == {"rate": 1.0}


def test_announcement_logged(caplog):
    with caplog.at_level(logging.INFO, logger="cpmodel.resolver"):
        resolve(spec("Normal", CHANGING, Fixed(1.0)))
    assert "Changepoint distribution is Normal with changing mean and fixed variance" in caplog.text


def test_announcement_can_be_disabled(monkeypatch, caplog):
    monkeypatch.setattr(settings, "announce_model", False)
    with caplog.at_level(logging.INFO, logger="cpmodel.resolver"):
        resolve(spec("Normal", CHANGING, Fixed(1.0)))
    assert "Changepoint distribution" not in caplog.text


def test_hook_receives_descriptor():
    seen = []
    descriptor = resolve(spec("OLS"), on_resolved=seen.append)
    assert seen == [descriptor]


def test_failing_hook_does_not_change_result(caplog):
    def boom(_descriptor):
        raise RuntimeError("observer down")

    with caplog.at_level(logging.WARNING, logger="cpmodel.resolver"):
        descriptor = resolve(spec("Exponential", CHANGING), on_resolved=boom)
    assert descriptor.kind is SegmentKind.exponential
    assert "observer down" in caplog.text


def test_hook_not_called_on_failure():
    seen = []
    with pytest.raises(UnderspecifiedError):
        resolve(spec("Normal", Fixed(0.0), Fixed(1.0)), on_resolved=seen.append)
    assert seen == []


def test_ragged_series_is_syntax_error():
    with pytest.raises(SpecSyntaxError):
        resolve(spec("Poisson", CHANGING), series=[[1], [1, 2]])


def test_descriptor_and_invocation_are_hashable():
    from cpmodel.invocation import build

    first = resolve(spec("Normal", CHANGING, Fixed(2.0)))
    second = resolve(spec("Normal", CHANGING, Fixed(2.0)))
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert len({build(first, 10, [0.5]), build(second, 10, [0.5])}) == 1
