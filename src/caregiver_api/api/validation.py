"""Input validation shared by the request handlers."""

import re
from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from caregiver_api.domain.errors import ParameterValidationError, RequestBodyError
from caregiver_api.domain.models import ID_SEPARATOR

ID_SEPARATOR_URL_ESCAPED = "%23"
_ID_SUFFIX_PATTERN = "[a-zA-Z0-9-]+"

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_path_parameter(
    path_parameters: Mapping[str, str] | None,
    name: str,
    prefix: str | tuple[str, ...],
) -> str:
    """Return the id in path parameter ``name`` if it carries ``prefix``.

    Exactly one path parameter must be present. A ``#`` separator that
    arrives percent-encoded as ``%23`` is decoded before matching.
    """
    path_parameters = path_parameters or {}
    if not path_parameters:
        raise ParameterValidationError("no path parameters provided")
    if len(path_parameters) > 1:
        raise ParameterValidationError("too many path parameters provided")
    if name not in path_parameters:
        raise ParameterValidationError("invalid path parameters")

    prefixes = (prefix,) if isinstance(prefix, str) else prefix
    value = _unescape_separator(path_parameters[name], prefixes)
    alternatives = "|".join(re.escape(candidate) for candidate in prefixes)
    pattern = f"(?:{alternatives}){ID_SEPARATOR}{_ID_SUFFIX_PATTERN}"
    if re.fullmatch(pattern, value) is None:
        raise ParameterValidationError("id is not formatted correctly")
    return value


def validate_query_parameter(
    query_parameters: Mapping[str, str] | None, name: str
) -> str:
    """Return the non-empty value of query parameter ``name``."""
    if not query_parameters:
        raise ParameterValidationError("no query parameters provided")
    if name not in query_parameters:
        raise ParameterValidationError(f"query parameter {name} not found")
    value = query_parameters[name]
    if value == "":
        raise ParameterValidationError(f"query parameter {name} is empty")
    return value


def read_request_body(body: str | None, model: type[ModelT]) -> ModelT:
    """Strictly decode a JSON body into ``model``."""
    if not body:
        raise RequestBodyError("request body is empty")
    try:
        return model.model_validate_json(body, strict=True)
    except ValidationError as exc:
        raise RequestBodyError(
            f"invalid {model.__name__}: {exc.error_count()} error(s)"
        ) from exc


def _unescape_separator(value: str, prefixes: tuple[str, ...]) -> str:
    for candidate in prefixes:
        escaped = f"{candidate}{ID_SEPARATOR_URL_ESCAPED}"
        if value.startswith(escaped):
            return f"{candidate}{ID_SEPARATOR}{value[len(escaped):]}"
    return value
