from typing import Any, Self
from abc import ABC, abstractmethod
import copy
from . import context
from .factory import Defaults, TDefinitions, build, provide, theme
from .errors import BeginNotSupported, NoMatchingBegin, TagTypeMismatch
from .utils.logging import debug, logged


# -----------------------------------------------------------------------------
#
# BASE TAG
#
# -----------------------------------------------------------------------------


class BaseTag(ABC):
	"""The base of all tags, implementing their lifecycle. A tag is a value
	object: methods that change it return a modified copy.

	A tag is either rendered at once with `render()` (or `str()`), or opened
	with `begin()` and closed with `end()` called on its class:

	```
	Div.tag().setId("main").begin()
	…
	Div.end()
	```

	Tags opened with `begin()` are kept in a stack that is specific to the
	current asyncio task, see `htmltag.context`."""

	_beginExecuted: bool = False

	@classmethod
	def tag(cls, *definitions: TDefinitions, registry: Defaults | None = None) -> Self:
		"""Creates a new tag, configured by the registry defaults, then the
		instance defaults (`loadDefault()`) and then the given definitions."""
		return build(cls, *definitions, registry=registry)

	def loadDefault(self) -> TDefinitions:
		"""Can be overridden to give default definitions to all the tags of
		this class."""
		return {}

	# =========================================================================
	# PROVIDERS
	# =========================================================================

	def getDefaults(self, tag: "BaseTag") -> TDefinitions:
		return {}

	def apply(self, tag: "BaseTag", theme: str) -> TDefinitions:
		return {}

	def addDefaultProvider(self, *providers: Any) -> Self:
		return provide(self, *providers)

	def addThemeProvider(self, name: str, *providers: Any) -> Self:
		return theme(self, name, *providers)

	# =========================================================================
	# LIFECYCLE
	# =========================================================================

	def beforeRender(self) -> bool:
		"""Returning `False` skips the rendering of the tag."""
		return True

	def afterRender(self, result: str) -> str:
		return result

	def isBeginExecuted(self) -> bool:
		return self._beginExecuted

	@abstractmethod
	def run(self) -> str:
		"""Returns the markup of the tag, which is only the end tag when
		the tag was opened with `begin()`."""

	def runBegin(self) -> str:
		raise BeginNotSupported(type(self))

	def render(self) -> str:
		if self.beforeRender() is False:
			if logged(debug):
				debug("Render skipped", tag=type(self).__name__)
			return ""
		return self.afterRender(self.run())

	def begin(self) -> str:
		"""Returns the opening markup of the tag, and registers it in the
		current context so that `end()` can close it."""
		self._beginExecuted = True
		res = self.runBegin()
		context.push(self)
		return res

	@classmethod
	def end(cls) -> str:
		"""Closes the most recently opened tag of the current context,
		which must be an instance of this class, and returns its markup."""
		tag = context.pop()
		if tag is None:
			raise NoMatchingBegin(cls)
		elif type(tag) is not cls:
			raise TagTypeMismatch(type(tag), cls)
		return tag.render()

	# =========================================================================
	# HELPERS
	# =========================================================================

	def clone(self) -> Self:
		# State is never mutated in place, a shallow copy is enough
		return copy.copy(self)

	def toString(self) -> str:
		return self.render()

	def __str__(self) -> str:
		return self.render()


# EOF
