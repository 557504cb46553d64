"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler and converts
uncaught exceptions into :class:`fastapi.HTTPException` responses.
HTTPExceptions raised by the handler are propagated untouched. Model errors
(:class:`cpmodel.exceptions.ModelError` and subclasses) become ``422`` with the
error kind in the detail, so clients can tell an arity problem from an
unsupported family without parsing the message. Everything else is a ``500``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, Dict, TypeVar, cast

from fastapi import HTTPException

from cpmodel.exceptions import ModelError

F = TypeVar("F", bound=Callable[..., Any])


def model_error_detail(exc: ModelError) -> Dict[str, str]:
    return {"error": type(exc).__name__, "message": str(exc)}


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    * :class:`HTTPException` is re-raised verbatim.
    * :class:`ModelError` becomes ``HTTPException(422)`` with
      ``{"error": <class name>, "message": <text>}`` as detail.
    * Any other exception becomes ``HTTPException(500, detail=str(exc))``.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except ModelError as exc:
                raise HTTPException(status_code=422, detail=model_error_detail(exc)) from exc
            except Exception as exc:
                raise HTTPException(status_code=500, detail=str(exc)) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except ModelError as exc:
            raise HTTPException(status_code=422, detail=model_error_detail(exc)) from exc
        except Exception as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return cast(F, sync_wrapper)
