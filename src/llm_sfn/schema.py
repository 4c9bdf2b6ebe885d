"""JSON Schema generation from Python types."""

import dataclasses
from typing import Any, Dict, List, Optional, Union, get_origin, get_args, get_type_hints


def python_type_to_json_schema(python_type: Any) -> Dict[str, Any]:
    """Convert a Python type to JSON Schema.

    Args:
        python_type: Python type to convert

    Returns:
        JSON Schema representation
    """
    if python_type is type(None):
        return {"type": "null"}

    # bool before int, bool is an int subclass
    if python_type is bool:
        return {"type": "boolean"}
    elif python_type is str:
        return {"type": "string"}
    elif python_type is int:
        return {"type": "integer"}
    elif python_type is float:
        return {"type": "number"}
    elif python_type is list:
        return {"type": "array"}
    elif python_type is dict:
        return {"type": "object"}

    origin = get_origin(python_type)
    args = get_args(python_type)

    if origin is Union:
        if type(None) in args:
            non_none_args = [arg for arg in args if arg is not type(None)]
            if len(non_none_args) == 1:
                # Optional[T] is nullable T
                schema = python_type_to_json_schema(non_none_args[0])
                if "type" in schema:
                    if isinstance(schema["type"], list):
                        schema["type"].append("null")
                    else:
                        schema["type"] = [schema["type"], "null"]
                    return schema
                return {"oneOf": [schema, {"type": "null"}]}
        return {
            "oneOf": [python_type_to_json_schema(arg) for arg in args]
        }

    elif origin is list or origin is List:
        if args:
            return {
                "type": "array",
                "items": python_type_to_json_schema(args[0])
            }
        return {"type": "array"}

    elif origin is dict or origin is Dict:
        if len(args) >= 2:
            return {
                "type": "object",
                "additionalProperties": python_type_to_json_schema(args[1])
            }
        return {"type": "object"}

    # Any and unknown types allow anything
    return {}


def generate_arguments_schema(arguments: Optional[type]) -> Dict[str, Any]:
    """Generate the input schema for an arguments dataclass.

    Each field becomes a property. A ``description`` entry in the field
    metadata is copied into the property, and fields without a default are
    listed as required::

        @dataclass
        class Arguments:
            city: str = field(metadata={"description": "The city name"})

    Args:
        arguments: Dataclass describing the function arguments, or None
            for a function that takes none

    Returns:
        JSON Schema of type ``object``

    Raises:
        TypeError: If ``arguments`` is not a dataclass
    """
    if arguments is None:
        return {"type": "object", "properties": {}}

    if not (isinstance(arguments, type) and dataclasses.is_dataclass(arguments)):
        raise TypeError(f"Arguments must be a dataclass, got {arguments!r}")

    hints = get_type_hints(arguments)
    properties = {}
    required = []

    for f in dataclasses.fields(arguments):
        prop = python_type_to_json_schema(hints.get(f.name, Any))
        description = f.metadata.get("description")
        if description:
            prop["description"] = description
        properties[f.name] = prop

        if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            required.append(f.name)

    schema = {
        "type": "object",
        "properties": properties
    }

    if required:
        schema["required"] = required

    return schema


def validate_against_schema(value: Any, schema: Dict[str, Any]) -> Optional[str]:
    """Validate a value against a JSON Schema.

    Only types, array items, object properties and required keys are
    checked. Ranges and formats are advisory and left to the caller.

    Args:
        value: Value to validate
        schema: JSON Schema to validate against

    Returns:
        Error message if validation fails, None if valid
    """
    def validate_type(val: Any, expected_type: Union[str, List[str]]) -> bool:
        if isinstance(expected_type, list):
            return any(validate_type(val, t) for t in expected_type)

        if expected_type in ("integer", "number") and isinstance(val, bool):
            return False

        type_map = {
            "string": str,
            "integer": int,
            "number": (int, float),
            "boolean": bool,
            "array": list,
            "object": dict,
            "null": type(None)
        }

        expected_python_type = type_map.get(expected_type)
        if expected_python_type is None:
            return True

        return isinstance(val, expected_python_type)

    if not schema:
        return None

    if "type" in schema:
        if not validate_type(value, schema["type"]):
            if isinstance(schema["type"], list):
                return f"Value {value!r} does not match any of the allowed types {schema['type']}"
            else:
                return f"Value {value!r} does not match expected type {schema['type']}"

    if "oneOf" in schema:
        for sub_schema in schema["oneOf"]:
            if validate_against_schema(value, sub_schema) is None:
                return None
        return f"Value {value!r} does not match any of the oneOf schemas"

    if isinstance(value, list) and "items" in schema:
        for i, item in enumerate(value):
            error = validate_against_schema(item, schema["items"])
            if error:
                return f"Array item {i}: {error}"

    if isinstance(value, dict):
        if "properties" in schema:
            for prop_name, prop_schema in schema["properties"].items():
                if prop_name in value:
                    error = validate_against_schema(value[prop_name], prop_schema)
                    if error:
                        return f"Property {prop_name}: {error}"

        if "required" in schema:
            for required_prop in schema["required"]:
                if required_prop not in value:
                    return f"Missing required property: {required_prop}"

    return None
