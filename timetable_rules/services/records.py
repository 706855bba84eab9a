from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def as_model(model_cls: type[ModelT], value: ModelT | Mapping | object) -> ModelT:
    """Accept a model instance, a plain mapping or an attribute-bearing record."""
    if isinstance(value, model_cls):
        return value
    if isinstance(value, Mapping):
        return model_cls.model_validate(dict(value))
    return model_cls.model_validate(value, from_attributes=True)
