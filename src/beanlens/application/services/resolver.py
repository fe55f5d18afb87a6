"""Bean resolver: in-memory bean index and injection resolution."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from loguru import logger

from beanlens.domain.exceptions.resolution import ResolutionError
from beanlens.domain.model.bean import BeanDefinition
from beanlens.domain.model.resolution import ResolutionResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from beanlens.domain.model.constructor import Constructor
    from beanlens.domain.model.injection import InjectionPoint
    from beanlens.domain.model.method import Method
    from beanlens.domain.model.parameter import Parameter

_COLLECTION_PATTERNS = (
    re.compile(r"^List<.*>$", re.DOTALL),
    re.compile(r"^Set<.*>$", re.DOTALL),
    re.compile(r"^Collection<.*>$", re.DOTALL),
    re.compile(r"^Map<.*,.*>$", re.DOTALL),
)


def _unqualified(text: str) -> str:
    """`java.util.List<a.Foo>` -> `List<a.Foo>`, type arguments untouched."""
    head, bracket, rest = text.partition("<")
    return head.rsplit(".", 1)[-1].strip() + bracket + rest


def is_collection_type(type_: str) -> bool:
    """List<T>, Set<T>, Collection<T> or Map<K, V>, qualified or not."""
    if not type_:
        return False
    text = _unqualified(type_.strip())
    return any(pattern.match(text) for pattern in _COLLECTION_PATTERNS)


def _top_level_comma(text: str) -> int:
    depth = 0
    for index, char in enumerate(text):
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        elif char == "," and depth == 0:
            return index
    return -1


def extract_element_type(type_: str) -> str | None:
    """Element type of a collection type.

    `List<Foo>` -> `Foo`, `Map<String, Foo>` -> `Foo` (the value type).

    Args:
        type_: Declared type

    Returns:
        Element type, None when type_ has no complete type argument list
    """
    if not type_:
        return None
    text = type_.strip()
    open_index = text.find("<")
    if open_index == -1:
        return None
    depth = 0
    close_index = -1
    for index in range(open_index, len(text)):
        if text[index] == "<":
            depth += 1
        elif text[index] == ">":
            depth -= 1
            if depth == 0:
                close_index = index
                break
    if close_index == -1:
        return None
    content = text[open_index + 1 : close_index].strip()
    if _unqualified(text).startswith("Map<"):
        comma = _top_level_comma(content)
        if comma != -1:
            return content[comma + 1 :].strip()
    return content or None


def _erase(type_: str) -> str:
    """Type without type arguments or qualifier: `a.b.Foo<X>` -> `Foo`."""
    base = type_.split("<", 1)[0].strip()
    return base.rsplit(".", 1)[-1].strip()


class BeanResolver:
    """Index of bean definitions by name, declared type and interface.

    Mutable state owned by one caller and driven serially
    (clear-then-repopulate or remove-then-add). Not thread-safe.

    Indices:
        by name: one bean per name, last write wins
        by type: declared type -> beans, insertion order
        by interface: interface name -> beans, insertion order
    """

    def __init__(self) -> None:
        self._by_name: dict[str, BeanDefinition] = {}
        self._by_type: dict[str, list[BeanDefinition]] = {}
        self._by_interface: dict[str, list[BeanDefinition]] = {}

    # Cache mutation

    def add_bean_definition(self, bean: BeanDefinition) -> None:
        """Insert bean, replacing any bean with the same name in every index.

        Args:
            bean: Definition to index

        Raises:
            ResolutionError: If bean is not a BeanDefinition (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if not isinstance(bean, BeanDefinition):
            raise ResolutionError(f"expected BeanDefinition, got {type(bean).__name__}")

        previous = self._by_name.get(bean.name)
        if previous is not None:
            self._evict(previous)
            logger.bind(bean=bean.name).debug(
                "Bean {} redefined by {}", bean.name, bean.implementation_class
            )
        self._by_name[bean.name] = bean
        self._by_type.setdefault(bean.type, []).append(bean)
        for interface in dict.fromkeys(bean.interfaces):
            self._by_interface.setdefault(interface, []).append(bean)

    def add_bean_definitions(self, beans: Iterable[BeanDefinition]) -> None:
        """Insert beans in order."""
        for bean in beans:
            self.add_bean_definition(bean)

    def remove_bean_definition(self, name: str) -> BeanDefinition | None:
        """Remove the bean named name from every index.

        Returns:
            Removed bean, None if no bean had that name
        """
        bean = self._by_name.get(name)
        if bean is not None:
            self._evict(bean)
        return bean

    def clear_cache(self) -> None:
        """Empty all three indices."""
        self._by_name.clear()
        self._by_type.clear()
        self._by_interface.clear()

    def _evict(self, bean: BeanDefinition) -> None:
        del self._by_name[bean.name]
        self._remove_from(self._by_type, bean.type, bean.name)
        for interface in bean.interfaces:
            self._remove_from(self._by_interface, interface, bean.name)

    @staticmethod
    def _remove_from(index: dict[str, list[BeanDefinition]], key: str, name: str) -> None:
        remaining = [b for b in index.get(key, ()) if b.name != name]
        if remaining:
            index[key] = remaining
        else:
            index.pop(key, None)

    # Index queries

    def find_by_name(self, name: str) -> BeanDefinition | None:
        """Bean with this logical name."""
        if not name or not name.strip():
            return None
        return self._by_name.get(name)

    def find_by_type(self, type_: str) -> list[BeanDefinition]:
        """Beans whose declared type or interface set equals type_.

        Direct matches first, then interface matches, de-duplicated by name.
        """
        if not type_ or not type_.strip():
            return []
        candidates = list(self._by_type.get(type_, ()))
        names = {bean.name for bean in candidates}
        for bean in self._by_interface.get(type_, ()):
            if bean.name not in names:
                candidates.append(bean)
                names.add(bean.name)
        return candidates

    def find_by_interface(self, interface: str) -> list[BeanDefinition]:
        """Beans implementing interface."""
        if not interface or not interface.strip():
            return []
        return list(self._by_interface.get(interface, ()))

    def get_all(self) -> list[BeanDefinition]:
        """Every indexed bean, insertion order."""
        return list(self._by_name.values())

    def get_count(self) -> int:
        """Number of indexed beans."""
        return len(self._by_name)

    # Resolution

    def resolve_type(self, type_: str) -> ResolutionResult:
        """Resolve a declared dependency type.

        Exact declared-type and interface matches are used when any exist.
        Otherwise, in order: collection element type, type with its
        arguments erased, simple name of a qualified type.

        Args:
            type_: Declared type as written

        Returns:
            ResolutionResult, empty when nothing matches

        Raises:
            TypeError: If type_ is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if type_ is None:
            raise TypeError("type_ must not be None")

        text = type_.strip()
        if not text:
            return ResolutionResult.empty()

        candidates = self.find_by_type(text)
        if candidates:
            return ResolutionResult.of(tuple(candidates))

        if is_collection_type(text):
            element = extract_element_type(text)
            elements = self.resolve_type(element).candidates if element else ()
            return ResolutionResult.of(elements, is_collection=True)

        erased = _erase(text)
        if erased and erased != text:
            candidates = self.find_by_type(erased)
            if candidates:
                return ResolutionResult.of(tuple(candidates))
        return ResolutionResult.empty()

    def resolve_parameter(self, parameter: Parameter) -> ResolutionResult:
        """Resolve a parameter (or field) by its declared type.

        Raises:
            TypeError: If parameter is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if parameter is None:
            raise TypeError("parameter must not be None")
        if not parameter.type or not parameter.type.strip():
            return ResolutionResult.empty()
        return self.resolve_type(parameter.type)

    def resolve_constructor(self, constructor: Constructor) -> list[ResolutionResult]:
        """One result per constructor parameter, in order.

        Raises:
            TypeError: If constructor is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if constructor is None:
            raise TypeError("constructor must not be None")
        return [self.resolve_parameter(p) for p in constructor.parameters]

    def resolve_method(self, method: Method) -> list[ResolutionResult]:
        """One result per method parameter, in order.

        Raises:
            TypeError: If method is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if method is None:
            raise TypeError("method must not be None")
        return [self.resolve_parameter(p) for p in method.parameters]

    def resolve_injection(self, point: InjectionPoint) -> InjectionPoint:
        """Copy of point carrying its resolution.

        Raises:
            TypeError: If point is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if point is None:
            raise TypeError("point must not be None")
        return point.with_resolution(self.resolve_type(point.target_type))

    def resolve_injections(self, points: Iterable[InjectionPoint]) -> list[InjectionPoint]:
        """Resolve points in order."""
        return [self.resolve_injection(point) for point in points]

    def disambiguate(self, result: ResolutionResult, hint: str | None) -> BeanDefinition | None:
        """Pick one candidate of an ambiguous result by name.

        Match order: exact bean name, then case-insensitive name (which
        covers a hint differing only by its first letter). The result
        itself is not changed.

        Args:
            result: Resolution to disambiguate
            hint: Field/parameter name or qualifier value

        Returns:
            Chosen bean, the resolved bean of an unambiguous result,
            None when no candidate matches
        """
        if result is None:
            raise TypeError("result must not be None")
        if result.resolved is not None:
            return result.resolved
        if not hint or result.is_collection:
            return None
        for bean in result.candidates:
            if bean.name == hint:
                return bean
        lowered = hint.lower()
        for bean in result.candidates:
            if bean.name.lower() == lowered:
                return bean
        return None
