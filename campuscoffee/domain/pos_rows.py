"""Map flat string rows (table fixtures, CSV imports) onto typed POS payloads.

Rows are plain ``Mapping[str, str]`` keyed by the camelCase wire names. All
problems in a row are collected and raised together so the caller sees every
bad field at once.
"""

from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from campuscoffee.domain.pos import CampusType, PosType
from campuscoffee.errors import DomainValidationError
from campuscoffee.schemas.pos import PosCreate, PosUpdate

TEXT_FIELDS = {
    "name": "name",
    "description": "description",
    "street": "street",
    "houseNumber": "house_number",
    "city": "city",
}

# Attribute name -> row key, for reporting pydantic errors
WIRE_NAMES = {attr: key for key, attr in TEXT_FIELDS.items()} | {"postal_code": "postalCode"}

# description may legitimately be blank
OPTIONAL_BLANK = {"description"}


def _parse_enum(enum_cls, raw: str, key: str, errors: dict[str, str]):
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        errors[key] = f"unknown value {raw!r}; expected one of {allowed}"
        return None


def _parse_int(raw: str, key: str, errors: dict[str, str]) -> int | None:
    try:
        return int(raw)
    except ValueError:
        errors[key] = f"expected an integer, got {raw!r}"
        return None


def _parse_fields(row: Mapping[str, str]) -> tuple[dict, dict[str, str]]:
    errors: dict[str, str] = {}
    values: dict = {}

    cleaned = {
        key: value.strip() if isinstance(value, str) else value
        for key, value in row.items()
    }

    for key in (*TEXT_FIELDS, "type", "campus", "postalCode"):
        raw = cleaned.get(key)
        if raw is None or (raw == "" and key not in OPTIONAL_BLANK):
            errors[key] = "required"

    for key, attr in TEXT_FIELDS.items():
        if key not in errors:
            values[attr] = cleaned[key]

    if "type" not in errors:
        values["type"] = _parse_enum(PosType, cleaned["type"], "type", errors)
    if "campus" not in errors:
        values["campus"] = _parse_enum(CampusType, cleaned["campus"], "campus", errors)
    if "postalCode" not in errors:
        values["postal_code"] = _parse_int(cleaned["postalCode"], "postalCode", errors)

    return values, errors


def _raise_if_invalid(errors: dict[str, str]) -> None:
    if errors:
        summary = "; ".join(f"{key}: {message}" for key, message in errors.items())
        raise DomainValidationError(f"Invalid POS row ({summary})", field_errors=errors)


def _wire_name(loc: tuple) -> str:
    if not loc:
        return "row"
    return WIRE_NAMES.get(str(loc[0]), str(loc[0]))


def _build(model_cls, values: dict):
    """Instantiate the payload, turning pydantic's complaints (e.g. lengths) into field errors."""
    try:
        return model_cls(**values)
    except ValidationError as exc:
        errors = {
            _wire_name(error["loc"]): error["msg"]
            for error in exc.errors()
        }
        _raise_if_invalid(errors)
        raise


def pos_from_row(row: Mapping[str, str]) -> PosCreate:
    """
    Map a flat row to a creation payload.

    Raises:
        DomainValidationError: If any required field is missing or unparseable
    """
    values, errors = _parse_fields(row)
    _raise_if_invalid(errors)
    return _build(PosCreate, values)


def pos_update_from_row(row: Mapping[str, str]) -> PosUpdate:
    """
    Map a flat row to an update payload. A blank or absent ``id`` means match by name.

    Raises:
        DomainValidationError: If any required field is missing or unparseable
    """
    values, errors = _parse_fields(row)
    raw_id = row.get("id")
    if isinstance(raw_id, str):
        raw_id = raw_id.strip()
    if raw_id:
        values["id"] = _parse_int(raw_id, "id", errors)
    _raise_if_invalid(errors)
    return _build(PosUpdate, values)


def pos_list_from_rows(rows: Iterable[Mapping[str, str]]) -> list[PosCreate]:
    """
    Map a table of rows to creation payloads, preserving order.

    Raises:
        DomainValidationError: With field errors keyed as ``"<row index>.<field>"``
    """
    result = []
    errors: dict[str, str] = {}
    for index, row in enumerate(rows):
        try:
            result.append(pos_from_row(row))
        except DomainValidationError as exc:
            errors.update(
                {f"{index}.{key}": message for key, message in exc.field_errors.items()}
            )
    _raise_if_invalid(errors)
    return result
