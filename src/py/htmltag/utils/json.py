from typing import Any, TypeAlias
from enum import Enum
from dataclasses import is_dataclass
import json as basejson

TPrimitive: TypeAlias = None | bool | int | float | str | list[Any] | dict[str, Any]

# Attribute values are embedded in markup, so we want the compact form.
COMPACT: tuple[str, str] = (",", ":")


def asPrimitive(value: Any, *, currentDepth: int = 0) -> TPrimitive:
	"""Converts the given value to a primitive value that can be converted
	to JSON"""
	if value is None or type(value) in (bool, int, float, str):
		return value
	elif isinstance(value, Enum):
		return asPrimitive(value.value, currentDepth=currentDepth + 1)
	elif isinstance(value, tuple) and hasattr(value, "_fields"):
		return {
			k: asPrimitive(getattr(value, k), currentDepth=currentDepth + 1)
			for k in value._fields
		}
	elif isinstance(value, (list, tuple, set)):
		return [asPrimitive(_, currentDepth=currentDepth + 1) for _ in value]
	elif isinstance(value, dict):
		return {
			str(asPrimitive(k)): asPrimitive(v, currentDepth=currentDepth + 1)
			for k, v in value.items()
		}
	elif is_dataclass(value):
		return {
			k: asPrimitive(getattr(value, k), currentDepth=currentDepth + 1)
			for k in value.__annotations__
		}
	else:
		return str(value)


def asJSON(value: Any) -> str:
	"""Serializes the value as compact JSON, with unicode left as-is."""
	return basejson.dumps(asPrimitive(value), separators=COMPACT, ensure_ascii=False)


# EOF
