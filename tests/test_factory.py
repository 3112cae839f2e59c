import pytest
from htmltag import (
	BaseBlock,
	BaseInline,
	BaseTag,
	Defaults,
	DEFAULTS,
	Div,
	Span,
	setDefaults,
	getDefaults,
)
from htmltag.errors import AbstractInstantiation
from htmltag.factory import configure
from htmltag.values import AttributeProperty


class Card(Div):
	label: str = "card"

	def loadDefault(self):
		return {"class": "card", "id": "instance"}


class DefaultsProvider:
	def getDefaults(self, tag):
		return {"class": "provided", "data-provider": True}


class ThemeProvider:
	def apply(self, tag, theme):
		return {"class": f"theme-{theme}"} if theme == "dark" else {}


# -----------------------------------------------------------------------------
#
# CREATION
#
# -----------------------------------------------------------------------------


def test_abstract():
	for cls in (BaseTag, BaseBlock, BaseInline):
		with pytest.raises(AbstractInstantiation) as error:
			cls.tag()
		assert cls.__name__ in str(error.value)
	with pytest.raises(TypeError):
		BaseBlock.tag()


def test_definitions():
	tag = Div.tag({"class": "box", "id": "main", "content": "Hi"})
	assert tag.render() == '<div class="box" id="main">\nHi\n</div>'


def test_definitions_attributes():
	tag = Div.tag({"data-id": 7, "hidden": True, AttributeProperty.Title: "T"})
	assert tag.render() == '<div data-id="7" hidden title="T">\n</div>'


def test_definitions_spread():
	tag = Div.tag({"class": "a"}, {"class": ("b", True), "content": ["x", "y"]})
	assert tag.render() == '<div class="b">\nxy\n</div>'


def test_definitions_order():
	tag = Div.tag({"id": "first"}, {"id": "second"})
	assert tag.getAttribute("id") == "second"


def test_definitions_public_attribute():
	card = Card.tag({"label": "custom"})
	assert card.label == "custom"
	assert Card.tag().label == "card"
	assert Card.label == "card"


def test_configure():
	tag = Div.tag()
	configured = configure(tag, {"setId": "x"})
	assert configured.getAttribute("id") == "x"
	assert tag.hasAttribute("id") is False


# -----------------------------------------------------------------------------
#
# DEFAULTS
#
# -----------------------------------------------------------------------------


def test_instance_defaults():
	assert Card.tag().render() == '<div class="card" id="instance">\n</div>'
	assert Card.tag({"id": "caller", "class": "extra"}).render() == (
		'<div class="card extra" id="caller">\n</div>'
	)


def test_registry():
	registry = Defaults().set(Card, {"id": "registry", "class": "registered"})
	tag = Card.tag({"class": "caller"}, registry=registry)
	assert tag.getAttribute("id") == "instance"
	assert tag.getAttribute("class") == "registered card caller"
	assert Card in registry
	assert Card.tag().getAttribute("class") == "card"
	registry.clear(Card)
	assert registry.get(Card) == {}


def test_global_defaults():
	setDefaults(Span, {"class": "global"})
	assert getDefaults(Span) == {"class": "global"}
	assert Span.tag().content("x").render() == '<span class="global">x</span>'
	# Defaults are registered per type
	assert Div.tag().render() == "<div>\n</div>"
	DEFAULTS.clear()
	assert Span.tag().render() == "<span></span>"


# -----------------------------------------------------------------------------
#
# PROVIDERS
#
# -----------------------------------------------------------------------------


def test_default_provider():
	assert Div.tag().addDefaultProvider(DefaultsProvider).render() == (
		'<div class="provided" data-provider>\n</div>'
	)
	assert Div.tag().addDefaultProvider(DefaultsProvider()).getAttribute("class") == (
		"provided"
	)


def test_theme_provider():
	assert Div.tag().addThemeProvider("dark", ThemeProvider).getAttribute("class") == (
		"theme-dark"
	)
	assert Div.tag().addThemeProvider("light", ThemeProvider).render() == (
		"<div>\n</div>"
	)


def test_tag_as_provider():
	assert Div.tag().getDefaults(Div.tag()) == {}
	assert Div.tag().apply(Div.tag(), "dark") == {}
	assert Div.tag().addDefaultProvider(Div).render() == "<div>\n</div>"


# EOF
