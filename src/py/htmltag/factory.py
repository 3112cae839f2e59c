from typing import Any, Callable, Iterable, Mapping, TypeAlias, TypeVar
from enum import Enum
import copy
import inspect
from mypy_extensions import KwArg, VarArg
from .errors import AbstractInstantiation
from .utils.logging import debug, logged

# --
# Tags are created through a factory that applies definitions: mappings of
# action to argument(s). An action is resolved on the tag, in this order:
#
# - a method of that name, called with the argument(s), like `content`
# - a setter for that name, like `class` → `setClass`
# - a public attribute of the tag, set on a copy
# - otherwise an HTML attribute, set with `setAttribute`
#
# Lists and tuples are spread as the method's arguments.

T = TypeVar("T")
TDefinitions: TypeAlias = Mapping[Any, Any]
TAction: TypeAlias = Callable[[VarArg(Any), KwArg(Any)], Any]


# -----------------------------------------------------------------------------
#
# DEFAULTS
#
# -----------------------------------------------------------------------------


class Defaults:
	"""A registry of default definitions per tag type. Registries are meant
	to be populated once, when the application initializes."""

	def __init__(self) -> None:
		self.definitions: dict[type, dict[Any, Any]] = {}

	def set(self, tag: type, definitions: TDefinitions) -> "Defaults":
		self.definitions[tag] = dict(definitions)
		return self

	def get(self, tag: type) -> dict[Any, Any]:
		return self.definitions.get(tag, {})

	def clear(self, tag: type | None = None) -> "Defaults":
		if tag is None:
			self.definitions.clear()
		else:
			self.definitions.pop(tag, None)
		return self

	def __contains__(self, tag: type) -> bool:
		return tag in self.definitions

	def __repr__(self) -> str:
		return f"(Defaults {' '.join(_.__name__ for _ in self.definitions)})"


# The process-wide registry, used when no registry is given
DEFAULTS = Defaults()


def setDefaults(tag: type, definitions: TDefinitions) -> Defaults:
	return DEFAULTS.set(tag, definitions)


def getDefaults(tag: type) -> dict[Any, Any]:
	return DEFAULTS.get(tag)


# -----------------------------------------------------------------------------
#
# FACTORY
#
# -----------------------------------------------------------------------------


def create(cls: type[T]) -> T:
	if inspect.isabstract(cls):
		raise AbstractInstantiation(cls)
	if logged(debug):
		debug("Creating tag", tag=cls.__name__)
	return cls()


def resolve(tag: Any, action: str) -> TAction | None:
	"""Returns the method of `tag` that implements `action`, if any."""
	if action.startswith("_"):
		return None
	for name in (action, f"set{action[:1].upper()}{action[1:]}"):
		method = getattr(tag, name, None)
		if callable(method):
			return method
	return None


def configure(tag: T, definitions: TDefinitions) -> T:
	"""Applies the `definitions` to `tag`, returning the resulting tag."""
	for key, value in definitions.items():
		action = key.value if isinstance(key, Enum) else str(key)
		args = value if isinstance(value, (list, tuple)) else (value,)
		if (method := resolve(tag, action)) is not None:
			tag = method(*args)
		elif not action.startswith("_") and hasattr(tag, action):
			tag = copy.copy(tag)
			setattr(tag, action, value)
		else:
			if logged(debug):
				debug(
					"Definition applied as attribute",
					tag=type(tag).__name__,
					attribute=action,
				)
			tag = getattr(tag, "setAttribute")(key, value)
	return tag


def build(
	cls: type[T], *definitions: TDefinitions, registry: Defaults | None = None
) -> T:
	"""Creates an instance of `cls` and configures it with, in increasing
	priority, the registry defaults for `cls`, the instance's own defaults
	and the given definitions."""
	tag = create(cls)
	for _ in (
		(registry or DEFAULTS).get(cls),
		getattr(tag, "loadDefault")(),
		*definitions,
	):
		if _:
			tag = configure(tag, _)
	return tag


# -----------------------------------------------------------------------------
#
# PROVIDERS
#
# -----------------------------------------------------------------------------


def providers(items: Iterable[Any]) -> Iterable[Any]:
	"""Yields provider instances, instantiating the given classes."""
	for _ in items:
		yield _() if isinstance(_, type) else _


def provide(tag: T, *items: Any) -> T:
	"""Configures the tag with the definitions returned by each provider's
	`getDefaults(tag)`."""
	for provider in providers(items):
		if definitions := provider.getDefaults(tag):
			if logged(debug):
				debug("Applying defaults provider", provider=type(provider).__name__)
			tag = configure(tag, definitions)
	return tag


def theme(tag: T, name: str, *items: Any) -> T:
	"""Configures the tag with the definitions returned by each provider's
	`apply(tag, name)`."""
	for provider in providers(items):
		if definitions := provider.apply(tag, name):
			if logged(debug):
				debug(
					"Applying theme provider",
					provider=type(provider).__name__,
					theme=name,
				)
			tag = configure(tag, definitions)
	return tag


# EOF
