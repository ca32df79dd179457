"""Field validators shared by the request schemas."""
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence, TypeVar

import pytz
from pydantic import AnyUrl, BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ridecatalog.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_url_adapter = TypeAdapter(AnyUrl)


def check_url(value: Optional[str]) -> Optional[str]:
    """Reject malformed URLs; empty and missing values pass through untouched.

    The original string is returned so stored URLs are never normalised.
    """
    if value is None or value == "":
        return value
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError(f"Invalid URL: {value!r}") from None
    return value


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken to be UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return pytz.utc.localize(value)


def validate_payload(model_cls: type[ModelT], data: Any) -> ModelT:
    """Validate raw input against a schema, raising the domain ValidationError."""
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid input", details=error_details(exc.errors())) from None


def error_details(errors: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Reduce pydantic error entries to JSON-safe location/message pairs."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": str(err.get("msg", ""))}
        for err in errors
    ]
