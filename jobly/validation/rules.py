from typing import Any, Dict

from jsonschema import Draft7Validator, FormatChecker

from ..errors import BadRequestError

_FORMAT_CHECKER = FormatChecker()


def _describe(error) -> str:
    where = ".".join(str(p) for p in error.path)
    return f"{where}: {error.message}" if where else error.message


def validate_payload(payload: Any, schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a request body against `schema`; raise BadRequestError listing every problem.
    """
    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object")
    validator = Draft7Validator(schema, format_checker=_FORMAT_CHECKER)
    errors = sorted(validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        raise BadRequestError("; ".join(_describe(e) for e in errors))
    return payload
