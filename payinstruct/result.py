"""Stage result values for the instruction pipeline.

Each stage returns Ok(value) or Err(code, message). Expected business failures
travel as Err values; only the pipeline turns them into an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from payinstruct.models.constants import StatusCode

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    code: StatusCode
    message: str


Result = Union[Ok[T], Err]


def is_err(result: Result) -> bool:
    return isinstance(result, Err)
