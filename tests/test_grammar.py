"""
Test cases for the textual model notation parser, covering the changing token,
numeric literals, environment names, keyword arguments and malformed input.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from cpmodel.exceptions import SpecSyntaxError
from cpmodel.grammar import parse
from cpmodel.markers import CHANGING, DistributionSpec, Fixed


def test_parse_changing_and_float():
    assert parse("Normal(?, 2.0)") == DistributionSpec("Normal", (CHANGING, Fixed(2.0)))


def test_parse_int_and_exponent_literals():
    spec = parse("Gamma( 3 , ? )")
    assert spec.parameters == (Fixed(3), CHANGING)
    assert isinstance(spec.parameters[0].value, int)
    assert parse("Normal(?, 1e-3)").parameters[1] == Fixed(0.001)
    assert parse("Normal(-.5, ?)").parameters[0] == Fixed(-0.5)


def test_parse_names_from_env():
    spec = parse("Normal(?, sigma)", env={"sigma": 1.5})
    assert spec.parameters == (CHANGING, Fixed(1.5))


def test_parse_unknown_name_is_syntax_error():
    with pytest.raises(SpecSyntaxError):
        parse("Normal(?, sigma)")


def test_parse_keyword_argument():
    assert parse("Nonparametric(K=5)") == DistributionSpec("Nonparametric", (Fixed(5),))
    assert parse("Normal(mu=0.0, sigma=?)").parameters == (Fixed(0.0), CHANGING)


def test_parse_keyword_must_match_position():
    with pytest.raises(SpecSyntaxError):
        parse("Normal(sigma=?, mu=0.0)")
    with pytest.raises(SpecSyntaxError):
        parse("Nonparametric(J=5)")


def test_parse_keyword_on_unknown_family_is_kept_for_resolver():
    spec = parse("Weibull(k=?)")
    assert spec.family == "Weibull"
    assert spec.parameters == (CHANGING,)


def test_parse_zero_argument_forms():
    assert parse("OLS()") == DistributionSpec("OLS", ())
    assert parse("OLS") == DistributionSpec("OLS", ())


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Normal(?, 2.0",
        "Normal ?, 2.0)",
        "Normal(?, (2.0))",
        "Normal(?,)",
        "Normal(?, 2.0.0)",
        "Normal(?, sigma=)",
        "3(?)",
    ],
)
def test_parse_malformed(text):
    with pytest.raises(SpecSyntaxError):
        parse(text)


def test_parse_rejects_non_text():
    with pytest.raises(SpecSyntaxError):
        parse(42)


def test_changing_token_is_configurable(monkeypatch):
    monkeypatch.setattr(settings, "changing_token", "*")
    assert parse("Normal(*, 1.0)").parameters == (CHANGING, Fixed(1.0))
    with pytest.raises(SpecSyntaxError):
        parse("Normal(?, 1.0)")


def test_parse_notational_families_accept_any_keyword():
    assert parse("Exponential(rate=?)").parameters == (CHANGING,)
    assert parse("Poisson(lambda_=?)").parameters == (CHANGING,)


def test_parse_env_marker_is_kept():
    spec = parse("Normal(mu, 1.0)", env={"mu": CHANGING})
    assert spec.parameters == (CHANGING, Fixed(1.0))
    assert parse("Normal(?, s)", env={"s": Fixed(2.0)}).parameters[1] == Fixed(2.0)
