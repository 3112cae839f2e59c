from typing import Any
import asyncio
import threading
import weakref
from .utils.logging import event, logged

# --
# Tags opened with `begin()` are kept in a stack that is specific to the
# execution context, so that concurrent tasks can each open and close their
# own tags. The context is the current asyncio task or, for code running
# outside of any task, a per-thread placeholder. Stacks are weakly keyed by
# their context, so that the stacks of finished tasks can be collected.


class MainContext:
	"""Stands for code running outside of an asyncio task."""

	def __repr__(self) -> str:
		return f"(MainContext {id(self)})"


LOCAL = threading.local()
STACKS: "weakref.WeakKeyDictionary[Any, list[Any]]" = weakref.WeakKeyDictionary()


def current() -> Any:
	"""Returns the object identifying the current execution context."""
	try:
		task = asyncio.current_task()
	except RuntimeError:
		task = None
	if task is not None:
		return task
	main = getattr(LOCAL, "main", None)
	if main is None:
		main = LOCAL.main = MainContext()
	return main


def push(tag: Any) -> int:
	"""Pushes the tag on the current context's stack, creating the stack
	if needed, and returns the resulting depth."""
	key = current()
	stack = STACKS.get(key)
	if stack is None:
		stack = STACKS[key] = []
	stack.append(tag)
	if logged(event):
		event("Context.Push", type(tag).__name__, depth=len(stack))
	return len(stack)


def pop() -> Any | None:
	"""Pops the most recently pushed tag from the current context's stack,
	returning `None` when there is none. Empty stacks are dropped."""
	key = current()
	stack = STACKS.get(key)
	if not stack:
		return None
	tag = stack.pop()
	if not stack:
		del STACKS[key]
	if logged(event):
		event("Context.Pop", type(tag).__name__, depth=len(stack))
	return tag


def depth() -> int:
	"""Returns the number of tags opened and not yet closed in the current
	context."""
	return len(STACKS.get(current()) or ())


def pending() -> list[Any]:
	"""Returns the opened tags of the current context, the most recent last."""
	return list(STACKS.get(current()) or ())


def reset() -> int:
	"""Drops the current context's stack, returning how many tags were
	left opened."""
	return len(STACKS.pop(current(), None) or ())


# EOF
