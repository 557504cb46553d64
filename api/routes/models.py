"""
Model routes resolving changepoint model expressions and planning search invocations.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter

from cpmodel import build, resolve_model
from cpmodel.rules import RULES
from api.requests import PlanRequest, ResolveRequest
from api.responses import DescriptorView, InvocationView, RuleView
from api.routes.exception import handle_exceptions

log = logging.getLogger(__name__)

router = APIRouter(tags=["Models"])


@router.get("/models/rules", response_model=List[RuleView])
@handle_exceptions
async def model_rules() -> List[RuleView]:
    return [RuleView.from_rule(rule) for rule in RULES]


@router.post("/models/resolve", response_model=DescriptorView, summary="Resolve a changepoint model")
@handle_exceptions
async def resolve_route(req: ResolveRequest) -> DescriptorView:
    descriptor = resolve_model(req.model, env=req.env)
    return DescriptorView.from_descriptor(descriptor)


@router.post("/models/plan", response_model=InvocationView, summary="Plan a changepoint search")
@handle_exceptions
async def plan_route(req: PlanRequest) -> InvocationView:
    descriptor = resolve_model(req.model, series=req.series, env=req.env)
    invocation = build(
        descriptor,
        series_length=req.series_length,
        penalty_args=req.penalties,
        algorithm=req.algorithm,
    )
    log.debug("plan: %s -> %s", req.model, invocation.algorithm.value)
    return InvocationView.from_invocation(invocation)
