from typing import Any, Mapping, Self
import re
from enum import Enum
from mypy_extensions import trait
from .mixins import HasAttributes
from .attributes import PREFIX_ARIA, PREFIX_DATA, PREFIX_EVENT, addClass, oneOf
from .errors import EnumValueNotAllowed
from .values import (
	AttributeProperty,
	ContentEditable,
	Direction,
	Draggable,
	Language,
	Role,
	Translate,
)

# --
# Setters for the HTML global attributes. Each trait is a thin layer over
# `HasAttributes.setAttribute`: tags pick the traits that make sense for them.
# Convenience setters treat an empty string as a removal, use `setAttribute`
# to render an empty attribute value.
#
# SEE: https://developer.mozilla.org/en-US/docs/Web/HTML/Reference/Global_attributes

RE_INTEGER = re.compile(r"^\s*-?\d+\s*$")


def omitEmpty(value: Any) -> Any:
	return None if isinstance(value, str) and value == "" else value


def options(values: type[Enum]) -> list[str]:
	return [str(_.value) for _ in values]


def flag(value: Any) -> Any:
	"""Converts booleans to their `true`/`false` string form."""
	return ("true" if value else "false") if isinstance(value, bool) else value


# -----------------------------------------------------------------------------
#
# FLAGS
#
# -----------------------------------------------------------------------------


@trait
class CanBeAutofocus(HasAttributes):
	def setAutofocus(self, value: bool = True) -> Self:
		return self.setAttribute(AttributeProperty.Autofocus, value)


@trait
class CanBeHidden(HasAttributes):
	def setHidden(self, value: bool = True) -> Self:
		return self.setAttribute(AttributeProperty.Hidden, value)


# -----------------------------------------------------------------------------
#
# TEXT
#
# -----------------------------------------------------------------------------


@trait
class HasAccesskey(HasAttributes):
	def setAccesskey(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Accesskey, omitEmpty(value))


@trait
class HasId(HasAttributes):
	def setId(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Id, omitEmpty(value))


@trait
class HasTitle(HasAttributes):
	def setTitle(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Title, omitEmpty(value))


@trait
class HasStyle(HasAttributes):
	def setStyle(self, value: Any) -> Self:
		"""Sets the style as a string, or as a dictionary of
		`property -> value` where `None` values are skipped."""
		return self.setAttribute(AttributeProperty.Style, omitEmpty(value))


@trait
class HasMicroData(HasAttributes):
	def setItemId(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Itemid, omitEmpty(value))

	def setItemProp(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Itemprop, omitEmpty(value))

	def setItemRef(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Itemref, omitEmpty(value))

	def setItemScope(self, value: bool | None = True) -> Self:
		return self.setAttribute(AttributeProperty.Itemscope, value)

	def setItemType(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Itemtype, omitEmpty(value))


# -----------------------------------------------------------------------------
#
# CLASS
#
# -----------------------------------------------------------------------------


@trait
class HasClass(HasAttributes):
	def setClass(self, value: Any, override: bool = False) -> Self:
		"""Adds the given class names to the existing ones, or replaces them
		with `override`. The value can be a string, a list, a dictionary
		of `name -> condition` or a lazy value."""
		if value is None:
			return self.removeAttribute(AttributeProperty.CssClass)
		return self.withAttributes(addClass(dict(self._attributes), value, override))


# -----------------------------------------------------------------------------
#
# NAMESPACES
#
# -----------------------------------------------------------------------------


@trait
class HasAria(HasAttributes):
	"""ARIA attributes, keys can omit the `aria-` prefix and booleans are
	rendered as `true` or `false`."""

	def addAriaAttribute(self, key: Any, value: Any) -> Self:
		return self.setAttribute(key, value, prefix=PREFIX_ARIA, booleanString=True)

	def ariaAttributes(self, values: Mapping[Any, Any]) -> Self:
		return self.setAttributes(values, prefix=PREFIX_ARIA, booleanString=True)

	def removeAriaAttribute(self, key: Any) -> Self:
		return self.removeAttribute(key, prefix=PREFIX_ARIA)


@trait
class HasData(HasAttributes):
	"""Data attributes, keys can omit the `data-` prefix."""

	def addDataAttribute(self, key: Any, value: Any) -> Self:
		return self.setAttribute(key, value, prefix=PREFIX_DATA)

	def dataAttributes(self, values: Mapping[Any, Any]) -> Self:
		return self.setAttributes(values, prefix=PREFIX_DATA)

	def removeDataAttribute(self, key: Any) -> Self:
		return self.removeAttribute(key, prefix=PREFIX_DATA)


@trait
class HasEvents(HasAttributes):
	"""Event handler attributes. Keys must start with `on`, unless they
	name a known event without it (`click` for `onclick`)."""

	def addEvent(self, event: Any, handler: Any) -> Self:
		return self.setAttribute(
			event, handler, prefix=PREFIX_EVENT, booleanString=True
		)

	def events(self, values: Mapping[Any, Any]) -> Self:
		return self.setAttributes(values, prefix=PREFIX_EVENT, booleanString=True)

	def removeEvent(self, event: Any) -> Self:
		return self.removeAttribute(event, prefix=PREFIX_EVENT)


# -----------------------------------------------------------------------------
#
# CONSTRAINED
#
# -----------------------------------------------------------------------------


@trait
class HasContentEditable(HasAttributes):
	def setContentEditable(self, value: Any) -> Self:
		name = AttributeProperty.Contenteditable.value
		return self.setAttribute(
			name,
			None if value is None else oneOf(name, flag(value), options(ContentEditable)),
		)


@trait
class HasDraggable(HasAttributes):
	def setDraggable(self, value: Any) -> Self:
		name = AttributeProperty.Draggable.value
		return self.setAttribute(
			name,
			None if value is None else oneOf(name, flag(value), options(Draggable)),
		)


@trait
class HasSpellcheck(HasAttributes):
	def setSpellcheck(self, value: Any) -> Self:
		name = AttributeProperty.Spellcheck.value
		return self.setAttribute(
			name,
			None if value is None else oneOf(name, flag(value), ["false", "true"]),
		)


@trait
class HasDir(HasAttributes):
	def setDir(self, value: Any) -> Self:
		name = AttributeProperty.Dir.value
		return self.setAttribute(
			name, None if value is None else oneOf(name, value, options(Direction))
		)


@trait
class HasLang(HasAttributes):
	def setLang(self, value: Any) -> Self:
		name = AttributeProperty.Lang.value
		return self.setAttribute(
			name, None if value is None else oneOf(name, value, options(Language))
		)


@trait
class HasRole(HasAttributes):
	def setRole(self, value: Any) -> Self:
		name = AttributeProperty.Role.value
		return self.setAttribute(
			name, None if value is None else oneOf(name, value, options(Role))
		)


@trait
class HasTranslate(HasAttributes):
	def setTranslate(self, value: Any) -> Self:
		"""Sets `translate`, where booleans and `true`/`false` stand for
		`yes` and `no`."""
		name = AttributeProperty.Translate.value
		if value is None:
			return self.removeAttribute(name)
		elif value is True or value == "true":
			value = Translate.Yes
		elif value is False or value == "false":
			value = Translate.No
		return self.setAttribute(name, oneOf(name, value, options(Translate)))


@trait
class HasTabindex(HasAttributes):
	def setTabIndex(self, value: int | str | None) -> Self:
		"""Sets the tab index, which must be an integer greater or equal
		to `-1`."""
		name = AttributeProperty.Tabindex.value
		if value is None:
			return self.removeAttribute(name)
		elif (
			isinstance(value, bool)
			or not isinstance(value, (int, str))
			or (isinstance(value, str) and not RE_INTEGER.match(value))
			or int(value) < -1
		):
			raise EnumValueNotAllowed(name, value, ["integer >= -1"])
		return self.setAttribute(name, str(int(value)))


# EOF
