from typing import TYPE_CHECKING, Any, Mapping, Self
from types import MappingProxyType
from enum import Enum
from mypy_extensions import trait
from . import attributes
from .attributes import TAttributes, TAttributeValue
from .tags import Inline
from .html import encode, inline

# --
# Capabilities shared by tags. Each mixin keeps its state in attributes that
# are replaced, never mutated in place, so that a shallow copy of a tag is
# independent from the original.


def text(value: Any) -> str:
	return str(value.value) if isinstance(value, Enum) else str(value)


@trait
class HasAttributes:
	"""Holds the normalized attributes of a tag."""

	_attributes: TAttributes = {}

	if TYPE_CHECKING:

		def clone(self) -> Self: ...

	def withAttributes(self, values: TAttributes) -> Self:
		res = self.clone()
		res._attributes = values
		return res

	def setAttribute(
		self,
		key: Any,
		value: Any,
		*,
		prefix: str = "",
		booleanString: bool = False,
	) -> Self:
		"""Sets the attribute `key` to `value`, which is normalized right
		away. A `None` value removes the attribute."""
		return self.withAttributes(
			attributes.setAttribute(
				dict(self._attributes),
				key,
				value,
				prefix=prefix,
				booleanString=booleanString,
			)
		)

	def setAttributes(
		self,
		values: Mapping[Any, Any],
		*,
		prefix: str = "",
		booleanString: bool = False,
	) -> Self:
		return self.withAttributes(
			attributes.setAttributes(
				dict(self._attributes),
				values,
				prefix=prefix,
				booleanString=booleanString,
			)
		)

	def removeAttribute(self, key: Any, *, prefix: str = "") -> Self:
		return self.withAttributes(
			attributes.removeAttribute(dict(self._attributes), key, prefix=prefix)
		)

	def getAttributes(self) -> Mapping[str, TAttributeValue]:
		return MappingProxyType(self._attributes)

	def getAttribute(self, key: Any, default: Any = None) -> Any:
		return self._attributes.get(attributes.normalizeKey(key), default)

	def hasAttribute(self, key: Any) -> bool:
		return attributes.normalizeKey(key) in self._attributes


@trait
class HasContent:
	_content: str = ""

	if TYPE_CHECKING:

		def clone(self) -> Self: ...

	def content(self, *values: Any) -> Self:
		"""Appends the given values as text, encoding HTML special
		characters."""
		res = self.clone()
		res._content = self._content + "".join(
			encode(text(_)) for _ in values if _ is not None
		)
		return res

	def html(self, *values: Any) -> Self:
		"""Appends the given values as raw HTML."""
		res = self.clone()
		res._content = self._content + "".join(
			text(_) for _ in values if _ is not None
		)
		return res

	def getContent(self) -> str:
		return self._content


# -----------------------------------------------------------------------------
#
# DECORATION
#
# -----------------------------------------------------------------------------


def decoration(tag: Inline | None, content: str, attrs: TAttributes) -> str:
	"""Renders a prefix or suffix, wrapped in `tag` when given."""
	return content if tag is None else inline(tag, content, attrs)


@trait
class HasPrefixCollection:
	"""Content rendered before the tag, optionally wrapped in its own
	inline tag."""

	_prefix: str = ""
	_prefixAttributes: TAttributes = {}
	_prefixTag: Inline | None = None

	if TYPE_CHECKING:

		def clone(self) -> Self: ...

	def prefix(self, *values: Any) -> Self:
		res = self.clone()
		res._prefix = "".join(text(_) for _ in values if _ is not None)
		return res

	def prefixAttributes(self, values: Mapping[Any, Any]) -> Self:
		res = self.clone()
		res._prefixAttributes = attributes.setAttributes({}, values)
		return res

	def prefixClass(self, value: Any, override: bool = False) -> Self:
		res = self.clone()
		res._prefixAttributes = attributes.addClass(
			dict(self._prefixAttributes), value, override
		)
		return res

	def prefixTag(self, value: Inline | None = None) -> Self:
		res = self.clone()
		res._prefixTag = value
		return res

	def renderPrefix(self) -> str:
		return decoration(self._prefixTag, self._prefix, self._prefixAttributes)


@trait
class HasSuffixCollection:
	"""Content rendered after the tag, optionally wrapped in its own
	inline tag."""

	_suffix: str = ""
	_suffixAttributes: TAttributes = {}
	_suffixTag: Inline | None = None

	if TYPE_CHECKING:

		def clone(self) -> Self: ...

	def suffix(self, *values: Any) -> Self:
		res = self.clone()
		res._suffix = "".join(text(_) for _ in values if _ is not None)
		return res

	def suffixAttributes(self, values: Mapping[Any, Any]) -> Self:
		res = self.clone()
		res._suffixAttributes = attributes.setAttributes({}, values)
		return res

	def suffixClass(self, value: Any, override: bool = False) -> Self:
		res = self.clone()
		res._suffixAttributes = attributes.addClass(
			dict(self._suffixAttributes), value, override
		)
		return res

	def suffixTag(self, value: Inline | None = None) -> Self:
		res = self.clone()
		res._suffixTag = value
		return res

	def renderSuffix(self) -> str:
		return decoration(self._suffixTag, self._suffix, self._suffixAttributes)


@trait
class HasTemplate:
	_template: str = ""

	if TYPE_CHECKING:

		def clone(self) -> Self: ...

	def template(self, value: str) -> Self:
		"""Sets the layout of the tag, where `{prefix}`, `{tag}` and
		`{suffix}` are replaced by their markup."""
		res = self.clone()
		res._template = value
		return res

	def getTemplate(self) -> str:
		return self._template


# EOF
