"""
Param validation at the route boundary.

Turns pydantic errors into utils.normalize.ValidationError so every route
reports bad input with the same 400 body.
"""

from typing import Mapping, Optional, Type, TypeVar

from flask import request
from pydantic import ValidationError as PydanticValidationError

from utils.normalize import ValidationError
from .pydantic_models.base import BaseParamsModel

P = TypeVar('P', bound=BaseParamsModel)


def parse_params(model: Type[P], args: Optional[Mapping[str, str]] = None) -> P:
    """
    Validate query params against a param model.

    Args:
        model: BaseParamsModel subclass
        args: Raw params (defaults to request.args, first value per key)

    Raises:
        ValidationError: On the first invalid field
    """
    raw = dict(args) if args is not None else request.args.to_dict()
    try:
        return model.model_validate(raw)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = '.'.join(str(part) for part in first.get('loc', ())) or None
        received = raw.get(field) if field else None
        raise ValidationError(
            f"Invalid value for {field}: {first.get('msg')}",
            field=field,
            received_value=received,
        ) from e
