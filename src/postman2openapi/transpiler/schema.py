"""Schema inference from example JSON values."""

from typing import Any

from postman2openapi.openapi.models import Schema


def generate_schema(value: Any) -> Schema:
    """Infer a structural schema from one decoded JSON value.

    Array items are inferred from the first element and folded with
    ``merge_schemas`` over every later element. Object properties are
    emitted in key order.
    """
    if isinstance(value, dict):
        return Schema(
            type="object",
            properties={key: generate_schema(value[key]) for key in sorted(value)},
        )
    if isinstance(value, list):
        if not value:
            return Schema(type="array")
        items = generate_schema(value[0])
        for element in value[1:]:
            items = merge_schemas(items, generate_schema(element))
        return Schema(type="array", items=items)
    if isinstance(value, str):
        return Schema(type="string", example=value)
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return Schema(type="boolean", example=value)
    if isinstance(value, (int, float)):
        return Schema(type="number", example=value)
    if value is None:
        return Schema(nullable=True, example=None)
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def merge_schemas(original: Schema, new: Schema) -> Schema:
    """Unify two schemas observed for the same field.

    ``original`` wins on conflicting types. Only properties present on both
    sides are merged; array items are left as in ``original``.
    """
    merged = original.model_copy(deep=True)

    if merged.nullable is None and new.nullable is not None:
        merged.nullable = new.nullable
    elif merged.nullable is not None and new.nullable is not None and merged.nullable != new.nullable:
        merged.nullable = True

    if merged.type is None and new.type is not None:
        merged.type = new.type

    if merged.type == "object" and merged.properties is not None and new.properties is not None:
        for key, prop in merged.properties.items():
            if key in new.properties:
                merged.properties[key] = merge_schemas(prop, new.properties[key])

    return merged
