"""
Explicit interception pipeline for the API client.

Three ordered step lists replace callback registration:

* request steps receive the ``httpx.Request`` and return it (possibly with
  changed headers). Returning an ``httpx.Response`` instead short-circuits
  the network call; that response continues through the response steps.
* response steps transform the value; the first one receives the
  ``httpx.Response``.
* failure steps observe an ``httpx.HTTPError``. They cannot recover from it:
  the caller re-raises the original exception after ``reject`` returns. A
  step that raises is logged and skipped.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Union

import httpx

logger = logging.getLogger(__name__)

RequestStep = Callable[[httpx.Request], Union[httpx.Request, httpx.Response]]
ResponseStep = Callable[[Any], Any]
FailureStep = Callable[[Exception], None]


class Pipeline:
    def __init__(
        self,
        request_steps: Optional[List[RequestStep]] = None,
        response_steps: Optional[List[ResponseStep]] = None,
        failure_steps: Optional[List[FailureStep]] = None,
    ):
        self.request_steps: List[RequestStep] = list(request_steps or [])
        self.response_steps: List[ResponseStep] = list(response_steps or [])
        self.failure_steps: List[FailureStep] = list(failure_steps or [])

    def add_request_step(self, step: RequestStep) -> "Pipeline":
        self.request_steps.append(step)
        return self

    def add_response_step(self, step: ResponseStep) -> "Pipeline":
        self.response_steps.append(step)
        return self

    def add_failure_step(self, step: FailureStep) -> "Pipeline":
        self.failure_steps.append(step)
        return self

    def prepare(self, request: httpx.Request) -> Union[httpx.Request, httpx.Response]:
        for step in self.request_steps:
            result = step(request)
            if isinstance(result, httpx.Response):
                result.request = request
                return result
            request = result
        return request

    def resolve(self, response: httpx.Response) -> Any:
        value: Any = response
        for step in self.response_steps:
            value = step(value)
        return value

    def reject(self, exc: Exception) -> None:
        for step in self.failure_steps:
            try:
                step(exc)
            except Exception:
                logger.exception(f"Failure step {step!r} raised while handling {exc!r}")
