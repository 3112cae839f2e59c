import pytest
from collections import namedtuple
from htmltag.attributes import (
	addClass,
	classTokens,
	normalizeKey,
	normalizeValue,
	removeAttribute,
	render,
	setAttribute,
	setAttributes,
	style,
)
from htmltag.errors import (
	EventKeyPrefixMissing,
	HTMLTagError,
	KeyInvalid,
	ValueTypeInvalid,
)
from htmltag.utils.json import asJSON
from htmltag.values import Aria, AttributeProperty, DataProperty, Direction, Event


class Stringable:
	def __init__(self, value: str):
		self.value = value

	def __str__(self) -> str:
		return self.value


# -----------------------------------------------------------------------------
#
# KEYS
#
# -----------------------------------------------------------------------------


def test_key_enum():
	assert normalizeKey(AttributeProperty.CssClass) == "class"
	assert normalizeKey(Aria.Pressed, "aria-") == "aria-pressed"
	assert normalizeKey(DataProperty.Id, "data-") == "data-id"


def test_key_prefix():
	assert normalizeKey("label", "aria-") == "aria-label"
	assert normalizeKey("aria-label", "aria-") == "aria-label"
	assert normalizeKey("id", "data-") == "data-id"


def test_key_event():
	assert normalizeKey("onclick", "on") == "onclick"
	assert normalizeKey("click", "on") == "onclick"
	assert normalizeKey(Event.Click, "on") == "onclick"
	with pytest.raises(EventKeyPrefixMissing):
		normalizeKey("notanevent", "on")


def test_key_invalid():
	for key in ("", 1, None, 1.5):
		with pytest.raises(KeyInvalid):
			normalizeKey(key)
	with pytest.raises(HTMLTagError):
		normalizeKey("")
	with pytest.raises(ValueError):
		normalizeKey("")


# -----------------------------------------------------------------------------
#
# VALUES
#
# -----------------------------------------------------------------------------


def test_value_scalars():
	assert normalizeValue("k", None) is None
	assert normalizeValue("k", True) is True
	assert normalizeValue("k", False) is None
	assert normalizeValue("k", "text") == "text"
	assert normalizeValue("k", "") == ""
	assert normalizeValue("k", 42) == "42"
	assert normalizeValue("k", 1.5) == "1.5"


def test_value_boolean_string():
	assert normalizeValue("aria-pressed", True, booleanString=True) == "true"
	assert normalizeValue("aria-pressed", False, booleanString=True) == "false"
	assert normalizeValue("aria-pressed", None, booleanString=True) is None


def test_value_enum():
	assert normalizeValue("dir", Direction.Rtl) == "rtl"


def test_value_stringable():
	assert normalizeValue("title", Stringable("hello")) == "hello"


def test_value_json():
	assert normalizeValue("data-items", [1, 2, 3]) == "[1,2,3]"
	assert normalizeValue("data-config", {"a": 1, "b": "x"}) == '{"a":1,"b":"x"}'


def test_value_lazy():
	calls: list[int] = []

	def lazy() -> str:
		calls.append(1)
		return "value"

	assert normalizeValue("title", lazy) == "value"
	assert len(calls) == 1
	assert normalizeValue("k", lambda: None) is None
	assert normalizeValue("k", lambda: True) is True
	assert normalizeValue("k", lambda: True, booleanString=True) == "true"
	assert normalizeValue("k", lambda: {"a": 1}) == '{"a":1}'


def test_value_invalid():
	with pytest.raises(ValueTypeInvalid) as error:
		normalizeValue("title", object())
	assert "object" in str(error.value)
	assert error.value.key == "title"
	with pytest.raises(TypeError):
		normalizeValue("title", object())


# -----------------------------------------------------------------------------
#
# COMPOSITES
#
# -----------------------------------------------------------------------------


def test_class_tokens():
	assert classTokens("a  b") == ["a", "b"]
	assert classTokens(["a", ["b", "c"]]) == ["a", "b", "c"]
	assert classTokens({"active": True, "disabled": False, "x": lambda: 1}) == [
		"active",
		"x",
	]
	assert classTokens(None) == []
	assert classTokens(lambda: "lazy") == ["lazy"]
	with pytest.raises(ValueTypeInvalid):
		classTokens(object())


def test_class_merge():
	attrs = addClass({}, "btn")
	assert addClass(attrs, "btn primary") == {"class": "btn primary"}
	assert addClass({"class": "a b"}, "c", override=True) == {"class": "c"}
	assert addClass({"class": "a"}, "", override=True) == {}


def test_style():
	assert style({"color": "red", "font-size": "16px"}) == "color: red; font-size: 16px;"
	assert style({"color": None, "margin": 0}) == "margin: 0;"
	assert style({"color": None}) is None
	assert style("display: none;") == "display: none;"


def test_set_composites():
	attrs = setAttribute({}, "style", {"color": "red"})
	assert attrs == {"style": "color: red;"}
	attrs = setAttribute({}, "data", {"id": 1, "active": True})
	assert attrs == {"data-id": "1", "data-active": True}
	attrs = setAttribute({}, "aria", {"hidden": True, "label": "Close"})
	assert attrs == {"aria-hidden": "true", "aria-label": "Close"}
	attrs = setAttribute({"class": "a"}, "class", ["b", "c"])
	assert attrs == {"class": "b c"}


def test_set_lazy_composites():
	calls: list[int] = []

	def lazy() -> dict[str, str]:
		calls.append(1)
		return {"color": "red"}

	assert setAttribute({}, "style", lazy) == {"style": "color: red;"}
	assert len(calls) == 1
	assert setAttribute({}, "data", lambda: {"id": "1"}) == {"data-id": "1"}
	assert setAttribute({}, "aria", lambda: {"hidden": True}) == {"aria-hidden": "true"}
	assert setAttribute({"class": "a"}, "class", lambda: ["b"]) == {"class": "b"}
	assert setAttribute({"style": "x"}, "style", lambda: None) == {}


# -----------------------------------------------------------------------------
#
# MUTATIONS
#
# -----------------------------------------------------------------------------


def test_order():
	attrs = setAttributes({}, {"id": "x", "title": "t", "role": "r"})
	setAttribute(attrs, "id", "y")
	assert list(attrs) == ["id", "title", "role"]
	assert render(attrs) == ' id="y" title="t" role="r"'


def test_removal():
	attrs = setAttributes({}, {"id": "x", "title": "t"})
	setAttribute(attrs, "title", None)
	assert attrs == {"id": "x"}
	removeAttribute(attrs, "id")
	removeAttribute(attrs, "id")
	assert attrs == {}
	setAttribute(attrs, "disabled", False)
	assert "disabled" not in attrs


# -----------------------------------------------------------------------------
#
# RENDERING
#
# -----------------------------------------------------------------------------


def test_render_escaping():
	assert (
		render({"title": 'Test "quoted" value'})
		== ' title="Test &quot;quoted&quot; value"'
	)
	assert (
		render({"data-info": "Value with & ampersand"})
		== ' data-info="Value with &amp; ampersand"'
	)
	assert render({"title": "<b>'x'</b>"}) == ' title="&lt;b&gt;&apos;x&apos;&lt;/b&gt;"'
	assert render({"title": "a\nb\tc"}) == ' title="a\nb\tc"'


def test_render_flags():
	assert render({"disabled": True}) == " disabled"
	assert render({"disabled": False}) == ""
	assert render({"alt": None, "src": "a.png"}) == ' src="a.png"'
	assert render({"alt": ""}) == ' alt=""'
	assert render({}) == ""


def test_render_raw():
	assert render({AttributeProperty.Id: 1, "dir": Direction.Ltr}) == ' id="1" dir="ltr"'


def test_json_values():
	Point = namedtuple("Point", ["x", "y"])
	assert asJSON([Direction.Rtl, Point(1, 2)]) == '["rtl",{"x":1,"y":2}]'
	assert asJSON({"label": "café"}) == '{"label":"café"}'
	assert render({"data-point": Point(1, 2)}) == ' data-point="{&quot;x&quot;:1,&quot;y&quot;:2}"'


# EOF
