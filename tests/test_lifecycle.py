import asyncio
import gc
import threading
import pytest
from htmltag import BaseBlock, Div, Section, Span, Img, context
from htmltag.errors import (
	BeginNotSupported,
	HTMLTagError,
	NoMatchingBegin,
	TagTypeMismatch,
)
from htmltag.tags import Block


class Hidden(Div):
	def beforeRender(self) -> bool:
		return False


class Upper(Div):
	def afterRender(self, result: str) -> str:
		return super().afterRender(result).upper()


# -----------------------------------------------------------------------------
#
# BEGIN/END
#
# -----------------------------------------------------------------------------


def test_begin_end():
	assert Div.tag().setClass("c").begin() == '<div class="c">\n'
	assert context.depth() == 1
	assert Div.end() == "\n</div>"
	assert context.depth() == 0


def test_nested():
	output = [
		Div.tag().begin(),
		Section.tag().setId("s").begin(),
		"content",
		Section.end(),
		Div.end(),
	]
	assert "".join(output) == '<div>\n<section id="s">\ncontent\n</section>\n</div>'
	assert context.pending() == []


def test_pending():
	outer = Div.tag()
	inner = Section.tag()
	outer.begin()
	inner.begin()
	assert context.pending() == [outer, inner]
	assert inner.isBeginExecuted()
	Section.end()
	assert context.pending() == [outer]
	Div.end()


def test_mismatch():
	Div.tag().begin()
	with pytest.raises(TagTypeMismatch) as error:
		Section.end()
	assert "Section" in str(error.value)
	assert "Div" in str(error.value)
	# The mismatched tag is popped nonetheless
	assert context.depth() == 0


def test_subclass_mismatch():
	Upper.tag().begin()
	with pytest.raises(TagTypeMismatch):
		Div.end()


def test_no_begin():
	with pytest.raises(NoMatchingBegin):
		Div.end()
	with pytest.raises(RuntimeError):
		Section.end()
	with pytest.raises(HTMLTagError):
		Section.end()


def test_begin_not_supported():
	with pytest.raises(BeginNotSupported):
		Span.tag().begin()
	with pytest.raises(BeginNotSupported):
		Img.tag().begin()
	assert context.depth() == 0


def test_copy_of_begun_tag():
	tag = Div.tag().setId("x")
	tag.begin()
	copy = tag.setTitle("t")
	Div.end()
	# The copy keeps the begun state of its original
	assert copy.render() == "\n</div>"
	assert Div.tag().setId("x").render() == '<div id="x">\n</div>'


# -----------------------------------------------------------------------------
#
# HOOKS
#
# -----------------------------------------------------------------------------


def test_before_render():
	assert Hidden.tag().setId("x").render() == ""
	assert str(Hidden.tag()) == ""


def test_before_render_end():
	Hidden.tag().begin()
	assert Hidden.end() == ""
	assert context.depth() == 0


def test_after_render():
	assert Upper.tag().content("hi").render() == "<DIV>\nHI\n</DIV>"


def test_custom_block():
	class Aside(BaseBlock):
		def getTag(self):
			return Block.Aside

	assert Aside.tag().begin() == "<aside>\n"
	assert Aside.end() == "\n</aside>"


# -----------------------------------------------------------------------------
#
# CONTEXTS
#
# -----------------------------------------------------------------------------


def test_tasks_isolated():
	async def worker(name: str, delay: float) -> str:
		opening = Div.tag().setId(name).begin()
		await asyncio.sleep(delay)
		assert context.depth() == 1
		opening += Section.tag().begin()
		await asyncio.sleep(delay)
		assert context.depth() == 2
		return opening + Section.end() + Div.end()

	async def main() -> list[str]:
		return list(
			await asyncio.gather(worker("a", 0.01), worker("b", 0), worker("c", 0.005))
		)

	results = asyncio.run(main())
	for name, result in zip("abc", results):
		assert result == f'<div id="{name}">\n<section>\n\n</section>\n</div>'
	assert context.depth() == 0


def test_task_and_main_isolated():
	Div.tag().begin()

	async def worker() -> int:
		with pytest.raises(NoMatchingBegin):
			Div.end()
		return context.depth()

	assert asyncio.run(worker()) == 0
	assert context.depth() == 1
	Div.end()


def test_threads_isolated():
	depths: list[int] = []
	Div.tag().begin()

	def worker() -> None:
		depths.append(context.depth())
		Section.tag().begin()
		depths.append(context.depth())
		Section.end()

	thread = threading.Thread(target=worker)
	thread.start()
	thread.join()
	assert depths == [0, 1]
	assert context.depth() == 1
	Div.end()


def test_stack_dropped_when_empty():
	Div.tag().begin()
	assert context.current() in context.STACKS
	Div.end()
	assert context.current() not in context.STACKS


def test_orphaned_stack_collected():
	async def worker() -> int:
		# The task ends without closing its tag
		Div.tag().begin()
		return context.depth()

	assert asyncio.run(worker()) == 1
	gc.collect()
	assert len(context.STACKS) == 0


def test_reset():
	Div.tag().begin()
	Div.tag().begin()
	assert context.reset() == 2
	assert context.depth() == 0
	assert context.reset() == 0


# EOF
