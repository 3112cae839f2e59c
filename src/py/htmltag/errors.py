from enum import Enum
from typing import Any


# -----------------------------------------------------------------------------
#
# MESSAGES
#
# -----------------------------------------------------------------------------


class Message(Enum):
	CannotInstantiateAbstractClass = (
		"Cannot instantiate abstract class '{0}' via 'tag()' method."
	)
	EventKeyMustStartWithOn = "Event key '{0}' must start with 'on'."
	KeyMustBeNonEmptyString = (
		"Attribute key must be a non-empty string, got '{0}' ({1})."
	)
	ValueMustBeScalarOrCallable = "Value for attribute '{0}' must be a scalar, stringable, enum or callable, got '{1}'."
	ValueNotInList = "Value '{0}' is not allowed for attribute '{1}', expected one of: {2}."
	TagClassMismatchOnEnd = "Mismatched '{1}.end()' call, got '{0}'."
	TagDoesNotSupportBegin = "Tag '{0}' does not support 'begin()' method."
	UnexpectedEndCallNoBegin = (
		"Unexpected '{0}.end()' call, a matching 'begin()' is not found."
	)

	def format(self, *args: Any) -> str:
		return self.value.format(*args)


def typename(value: Any) -> str:
	return type(value).__name__


def qualname(value: type) -> str:
	return f"{value.__module__}.{value.__qualname__}"


# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------


class HTMLTagError(Exception):
	"""Base class of all the errors raised by `htmltag`, holding the attribute
	or tag name (`key`) and the offending `value` where relevant."""

	def __init__(
		self,
		message: str,
		key: str | None = None,
		value: Any = None,
	):
		super().__init__(message)
		self.message: str = message
		self.key: str | None = key
		self.value: Any = value


class KeyInvalid(HTMLTagError, ValueError):
	"""The attribute key is empty or is not a string once normalized."""

	def __init__(self, key: Any):
		super().__init__(
			Message.KeyMustBeNonEmptyString.format(key, typename(key)),
			value=key,
		)


class ValueTypeInvalid(HTMLTagError, TypeError):
	"""The attribute value cannot be normalized to a string or a flag."""

	def __init__(self, key: str, value: Any):
		super().__init__(
			Message.ValueMustBeScalarOrCallable.format(key, typename(value)),
			key=key,
			value=value,
		)


class EventKeyPrefixMissing(HTMLTagError, ValueError):
	def __init__(self, key: str):
		super().__init__(Message.EventKeyMustStartWithOn.format(key), key=key)


class EnumValueNotAllowed(HTMLTagError, ValueError):
	def __init__(self, key: str, value: Any, allowed: list[str]):
		super().__init__(
			Message.ValueNotInList.format(value, key, ", ".join(allowed)),
			key=key,
			value=value,
		)
		self.allowed: list[str] = allowed


class NoMatchingBegin(HTMLTagError, RuntimeError):
	"""`end()` was called with no open tag in the current context."""

	def __init__(self, tag: type):
		super().__init__(
			Message.UnexpectedEndCallNoBegin.format(qualname(tag)), key=tag.__name__
		)


class TagTypeMismatch(HTMLTagError, RuntimeError):
	"""`end()` was called on a tag type that is not the one on top of the
	current context's stack."""

	def __init__(self, got: type, expected: type):
		super().__init__(
			Message.TagClassMismatchOnEnd.format(qualname(got), qualname(expected)),
			key=expected.__name__,
			value=got,
		)


class AbstractInstantiation(HTMLTagError, TypeError):
	def __init__(self, tag: type):
		super().__init__(
			Message.CannotInstantiateAbstractClass.format(qualname(tag)),
			key=tag.__name__,
		)


class BeginNotSupported(HTMLTagError, RuntimeError):
	def __init__(self, tag: type):
		super().__init__(
			Message.TagDoesNotSupportBegin.format(qualname(tag)), key=tag.__name__
		)


# EOF
