from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from pulumi import Output, get_stack


def _map(val: Any) -> Any:
    if isinstance(val, (list, tuple)):
        return [_map(v) for v in val]
    elif isinstance(val, dict):
        return {k: _map(v) for k, v in val.items()}
    elif is_dataclass(val) and not isinstance(val, type):
        return {f.name: _map(getattr(val, f.name)) for f in fields(val)}
    elif isinstance(val, Enum):
        return val.value
    elif isinstance(val, Output):
        return val
    elif isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    else:
        return val


def outputs_from_exports(exports: object) -> dict:
    """Turn a module's exports into something ``register_outputs`` accepts

    Dataclasses become dicts, enums become their values, outputs are passed through untouched.

    :param exports: The exports object returned by a module's ``build``
    :return: The outputs keyed by stack name
    """
    return {
        get_stack(): _map(exports),
    }
