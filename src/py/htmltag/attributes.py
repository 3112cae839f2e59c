from typing import Any, Callable, Iterable, Mapping, TypeAlias, Union
from enum import Enum
from .values import Event
from .errors import KeyInvalid, ValueTypeInvalid, EventKeyPrefixMissing
from .errors import EnumValueNotAllowed
from .utils.json import asJSON

# --
# The attribute engine normalizes heterogeneous values into an ordered map of
# `name -> True | str` and serializes that map as escaped HTML attributes.
# All the functions that take an `attributes` dictionary update it in place
# and return it: tags are responsible for copying it before a mutation.

# A normalized value: `True` is a bare attribute, strings are quoted.
TAttributeValue: TypeAlias = Union[bool, str]
TAttributes: TypeAlias = dict[str, TAttributeValue]
TLazy: TypeAlias = Callable[[], Any]

PREFIX_DATA: str = "data-"
PREFIX_ARIA: str = "aria-"
PREFIX_EVENT: str = "on"

# Attributes whose value is a structure rather than a scalar
CLASS: str = "class"
STYLE: str = "style"
DATA: str = "data"
ARIA: str = "aria"

EVENTS: frozenset[str] = frozenset(_.value for _ in Event)

HTML_ATTRIBUTE_ESCAPED = str.maketrans(
	{"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&apos;"}
)


# -----------------------------------------------------------------------------
#
# NORMALIZATION
#
# -----------------------------------------------------------------------------


def isLazy(value: Any) -> bool:
	"""Lazy values are zero-argument callables, classes are not."""
	return callable(value) and not isinstance(value, type)


def isStringable(value: Any) -> bool:
	"""Tells if the value's type defines its own `__str__`, as opposed to
	the default `object` representation."""
	return type(value).__str__ is not object.__str__


def normalizeKey(key: Any, prefix: str = "") -> str:
	"""Resolves the given key to an attribute name, adding the `prefix`
	for short keys. Event keys (prefix `on`) are only expanded when the
	result is a known event name."""
	if isinstance(key, Enum):
		key = key.value
	if not isinstance(key, str) or not key:
		raise KeyInvalid(key)
	if not prefix or key.startswith(prefix):
		return key
	elif prefix == PREFIX_EVENT:
		if (name := f"{PREFIX_EVENT}{key}") in EVENTS:
			return name
		raise EventKeyPrefixMissing(key)
	else:
		return f"{prefix}{key}"


def normalizeValue(
	key: str, value: Any, *, booleanString: bool = False
) -> TAttributeValue | None:
	"""Normalizes the value of attribute `key`, returning `None` when the
	attribute is to be removed. Lazy values are invoked here, once."""
	if isLazy(value):
		return normalizeValue(key, value(), booleanString=booleanString)
	elif value is None:
		return None
	elif isinstance(value, bool):
		if booleanString:
			return "true" if value else "false"
		return True if value else None
	elif isinstance(value, Enum):
		return normalizeValue(key, value.value, booleanString=booleanString)
	elif isinstance(value, str):
		return value
	elif isinstance(value, (int, float)):
		return str(value)
	elif isinstance(value, (list, tuple, dict)):
		return asJSON(value)
	elif isStringable(value):
		return str(value)
	else:
		raise ValueTypeInvalid(key, value)


def oneOf(key: str, value: Any, allowed: Iterable[str]) -> str:
	"""Normalizes the value and ensures it is one of the `allowed` strings."""
	options = list(allowed)
	normalized = normalizeValue(key, value)
	if normalized not in options:
		raise EnumValueNotAllowed(key, value, options)
	return str(normalized)


# -----------------------------------------------------------------------------
#
# COMPOSITES
#
# -----------------------------------------------------------------------------


def classTokens(value: Any) -> list[str]:
	"""Returns the class names given in `value`, which can be a string of
	space-separated names, a collection, a dictionary of `name -> condition`
	or anything that normalizes to a string."""
	if isLazy(value):
		return classTokens(value())
	elif value is None or value is False:
		return []
	elif isinstance(value, Enum):
		return classTokens(value.value)
	elif isinstance(value, str):
		return value.split()
	elif isinstance(value, dict):
		return [
			_
			for k, v in value.items()
			if (v() if isLazy(v) else v)
			for _ in classTokens(k)
		]
	elif isinstance(value, (list, tuple, set, frozenset)):
		return [_ for v in value for _ in classTokens(v)]
	elif isinstance(value, (int, float)) and not isinstance(value, bool):
		return [str(value)]
	elif value is not True and isStringable(value):
		return str(value).split()
	else:
		raise ValueTypeInvalid(CLASS, value)


def addClass(attributes: TAttributes, value: Any, override: bool = False) -> TAttributes:
	"""Merges the class names in `value` with the existing ones, preserving
	their order and skipping duplicates. With `override`, the existing names
	are discarded. An empty result removes the attribute."""
	current = attributes.get(CLASS)
	tokens: list[str] = (
		[] if override or not isinstance(current, str) else current.split()
	)
	for _ in classTokens(value):
		if _ not in tokens:
			tokens.append(_)
	if tokens:
		attributes[CLASS] = " ".join(tokens)
	else:
		attributes.pop(CLASS, None)
	return attributes


def style(value: Any) -> str | None:
	"""Formats a style declaration. Dictionaries of `property -> value`
	render as `property: value;` pairs, skipping removed values."""
	if isLazy(value):
		return style(value())
	elif isinstance(value, dict):
		declarations = []
		for k, v in value.items():
			name = normalizeKey(k)
			if (declared := normalizeValue(name, v)) is None or declared is True:
				continue
			declarations.append(f"{name}: {declared};")
		return " ".join(declarations) or None
	else:
		normalized = normalizeValue(STYLE, value)
		return normalized if isinstance(normalized, str) and normalized else None


# -----------------------------------------------------------------------------
#
# MUTATIONS
#
# -----------------------------------------------------------------------------


def setAttribute(
	attributes: TAttributes,
	key: Any,
	value: Any,
	*,
	prefix: str = "",
	booleanString: bool = False,
) -> TAttributes:
	"""Sets the attribute `key` to the normalized `value`, removing it when
	the value normalizes to `None`. The `class`, `style`, `data` and `aria`
	keys also accept structured values."""
	name = normalizeKey(key, prefix)
	if isLazy(value):
		# Resolved once, so that lazy structures get expanded as well
		value = value()
	if name == CLASS and not isinstance(value, (str, bool)) and value is not None:
		# Setting the class directly overrides the existing names
		return addClass(attributes, value, override=True)
	elif name == STYLE and isinstance(value, dict):
		normalized: TAttributeValue | None = style(value)
	elif name in (DATA, ARIA) and isinstance(value, dict):
		for k, v in value.items():
			setAttribute(
				attributes,
				k,
				v,
				prefix=PREFIX_DATA if name == DATA else PREFIX_ARIA,
				booleanString=booleanString or name == ARIA,
			)
		return attributes
	else:
		normalized = normalizeValue(name, value, booleanString=booleanString)
	if normalized is None:
		attributes.pop(name, None)
	else:
		attributes[name] = normalized
	return attributes


def setAttributes(
	attributes: TAttributes,
	values: Mapping[Any, Any],
	*,
	prefix: str = "",
	booleanString: bool = False,
) -> TAttributes:
	for k, v in values.items():
		setAttribute(attributes, k, v, prefix=prefix, booleanString=booleanString)
	return attributes


def removeAttribute(
	attributes: TAttributes, key: Any, *, prefix: str = ""
) -> TAttributes:
	attributes.pop(normalizeKey(key, prefix), None)
	return attributes


# -----------------------------------------------------------------------------
#
# RENDERING
#
# -----------------------------------------------------------------------------


def escape(text: str) -> str:
	"""Escapes text so that it can be used as a double-quoted attribute value,
	newlines and tabs are kept as-is."""
	return text.translate(HTML_ATTRIBUTE_ESCAPED)


def render(attributes: Mapping[Any, Any]) -> str:
	"""Renders the attributes in their insertion order, each preceded by a
	space. Values that are not yet normalized are normalized here."""
	res: list[str] = []
	for k, v in attributes.items():
		name = normalizeKey(k)
		value = v if v is True or isinstance(v, str) else normalizeValue(name, v)
		if value is None:
			continue
		elif value is True:
			res.append(f" {name}")
		else:
			res.append(f' {name}="{escape(value)}"')
	return "".join(res)


# EOF
