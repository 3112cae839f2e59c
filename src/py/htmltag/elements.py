from typing import Any, Mapping, Self
from abc import abstractmethod
import re
from . import html, tags
from .config import TEMPLATE
from .tag import BaseTag
from .tags import TBlockTag
from .values import AttributeProperty
from .mixins import (
	HasContent,
	HasPrefixCollection,
	HasSuffixCollection,
	HasTemplate,
)
from .attribute import (
	CanBeAutofocus,
	CanBeHidden,
	HasAccesskey,
	HasAria,
	HasClass,
	HasContentEditable,
	HasData,
	HasDir,
	HasDraggable,
	HasEvents,
	HasId,
	HasLang,
	HasMicroData,
	HasRole,
	HasSpellcheck,
	HasStyle,
	HasTabindex,
	HasTitle,
	HasTranslate,
)

RE_BLANK_LINES = re.compile(r"\n{2,}")


# -----------------------------------------------------------------------------
#
# BASES
#
# -----------------------------------------------------------------------------


class BaseBlock(
	BaseTag,
	CanBeAutofocus,
	CanBeHidden,
	HasAccesskey,
	HasAria,
	HasClass,
	HasContent,
	HasContentEditable,
	HasData,
	HasDir,
	HasDraggable,
	HasEvents,
	HasId,
	HasLang,
	HasMicroData,
	HasRole,
	HasSpellcheck,
	HasStyle,
	HasTabindex,
	HasTitle,
	HasTranslate,
):
	"""Block elements can be rendered at once, or opened with `begin()` and
	closed with `end()`, in which case their content is whatever is output
	in between."""

	@abstractmethod
	def getTag(self) -> TBlockTag: ...

	def run(self) -> str:
		if self.isBeginExecuted():
			return html.end(self.getTag())
		else:
			return html.element(self.getTag(), self.getContent(), self._attributes)

	def runBegin(self) -> str:
		return html.begin(self.getTag(), self._attributes)

	def afterRender(self, result: str) -> str:
		return super().afterRender(RE_BLANK_LINES.sub("\n", result))


class BaseInline(
	BaseTag,
	CanBeHidden,
	HasAccesskey,
	HasAria,
	HasClass,
	HasContent,
	HasData,
	HasDir,
	HasEvents,
	HasId,
	HasLang,
	HasPrefixCollection,
	HasRole,
	HasStyle,
	HasSuffixCollection,
	HasTemplate,
	HasTitle,
	HasTranslate,
):
	"""Inline elements wrap their content, and can be decorated with a
	prefix and a suffix laid out by a template."""

	@abstractmethod
	def getTag(self) -> tags.Inline: ...

	def buildElement(
		self, content: str = "", tokens: Mapping[str, str] | None = None
	) -> str:
		"""Renders the template with the `{prefix}`, `{tag}` and `{suffix}`
		tokens, and the extra `tokens` given as `{"{name}": value}`."""
		return html.template(
			self._template or TEMPLATE,
			dict(tokens or {})
			| {
				"{prefix}": self.renderPrefix(),
				"{tag}": html.inline(self.getTag(), content, self._attributes),
				"{suffix}": self.renderSuffix(),
			},
		)

	def run(self) -> str:
		return self.buildElement(self.getContent())


class BaseVoid(
	BaseTag,
	CanBeHidden,
	HasAccesskey,
	HasAria,
	HasClass,
	HasData,
	HasDir,
	HasEvents,
	HasId,
	HasLang,
	HasRole,
	HasStyle,
	HasTabindex,
	HasTitle,
	HasTranslate,
):
	"""Void elements have neither content nor end tag."""

	@abstractmethod
	def getTag(self) -> tags.Voids: ...

	def run(self) -> str:
		return html.void(self.getTag(), self._attributes)


# -----------------------------------------------------------------------------
#
# BLOCKS
#
# -----------------------------------------------------------------------------


class Div(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Block.Div


class Section(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Block.Section


class Article(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Block.Article


class Nav(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Block.Nav


class Main(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Block.Main


class Header(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Block.Header


class Footer(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Block.Footer


class P(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Block.P


class Ul(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Lists.Ul


class Ol(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Lists.Ol


class Li(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Lists.Li


class Table(BaseBlock):
	def getTag(self) -> TBlockTag:
		return tags.Table.Table


# -----------------------------------------------------------------------------
#
# INLINES
#
# -----------------------------------------------------------------------------


class Span(BaseInline):
	def getTag(self) -> tags.Inline:
		return tags.Inline.Span


class A(BaseInline):
	def getTag(self) -> tags.Inline:
		return tags.Inline.A

	def setHref(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Href, value)


class Strong(BaseInline):
	def getTag(self) -> tags.Inline:
		return tags.Inline.Strong


class Em(BaseInline):
	def getTag(self) -> tags.Inline:
		return tags.Inline.Em


class Button(BaseInline):
	def getTag(self) -> tags.Inline:
		return tags.Inline.Button

	def setType(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Type, value)


class Label(BaseInline):
	def getTag(self) -> tags.Inline:
		return tags.Inline.Label

	def setFor(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.For, value)


# -----------------------------------------------------------------------------
#
# VOIDS
#
# -----------------------------------------------------------------------------


class Img(BaseVoid):
	def getTag(self) -> tags.Voids:
		return tags.Voids.Img

	def setSrc(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Src, value)

	def setAlt(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Alt, value)


class Br(BaseVoid):
	def getTag(self) -> tags.Voids:
		return tags.Voids.Br


class Hr(BaseVoid):
	def getTag(self) -> tags.Voids:
		return tags.Voids.Hr


class Input(BaseVoid, CanBeAutofocus):
	def getTag(self) -> tags.Voids:
		return tags.Voids.Input

	def setType(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Type, value)

	def setName(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Name, value)

	def setValue(self, value: Any) -> Self:
		return self.setAttribute(AttributeProperty.Value, value)


# EOF
