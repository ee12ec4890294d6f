import typing
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from hashset.basic import implements
from hashset import options
from hashset.protocols import IDisplayOptions, ISet, check_implements
from hashset.rendering import render

T = typing.TypeVar("T")


class HashSet(typing.Generic[T]):
    """
    An unordered set with a regular dict as a basis (an element is in the set
    if and only if it's a key in the dict).

    Use as:

        s = HashSet(19, 21, 1, 2, 4, 8)
        s.add(5, 7)
        assert 5 in s
        str(s) == "{1 2 4 5 7 8 19 21}"

        empty = HashSet[int]()

    The set algebra methods (`difference`, `symmetric_difference`,
    `intersection`, `union`) return new sets and never change their operands.
    `unite` is the in-place version of `union`.

    Note: it's not thread-safe. Concurrent mutation and access must be
    synchronized by the caller.
    """

    def __init__(
        self, *elements: T, display_options: Optional[IDisplayOptions] = None
    ) -> None:
        self._dct: Dict[T, None] = dict.fromkeys(elements)
        if display_options is None:
            display_options = options.DEFAULT_DISPLAY_OPTIONS
        self.display_options = display_options

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[T], display_options: Optional[IDisplayOptions] = None
    ) -> "HashSet[T]":
        ret: HashSet[T] = cls(display_options=display_options)
        ret._dct = dict.fromkeys(iterable)
        return ret

    def _new(self, dct: Dict[T, None]) -> "HashSet[T]":
        # The new set owns `dct`.
        ret: HashSet[T] = self.__class__(display_options=self.display_options)
        ret._dct = dct
        return ret

    # Mutation

    @implements(ISet.add)
    def add(self, *elements: T) -> None:
        for element in elements:
            self._dct[element] = None

    @implements(ISet.delete)
    def delete(self, *elements: T) -> None:
        dct = self._dct
        for element in elements:
            dct.pop(element, None)

    @implements(ISet.clear)
    def clear(self) -> None:
        self._dct.clear()

    # Queries

    def length(self) -> int:
        return len(self._dct)

    @implements(ISet.is_empty)
    def is_empty(self) -> bool:
        return not self._dct

    @implements(ISet.contains)
    def contains(self, element: T) -> bool:
        return element in self._dct

    @implements(ISet.to_list)
    def to_list(self) -> List[T]:
        """
        :return:
            A new list with the elements (in no particular order).
        """
        return list(self._dct)

    def to_sorted_list(self) -> List[T]:
        """
        :return:
            A new list with the elements sorted in ascending order.

        :raises TypeError:
            If the elements can't be compared with each other.
        """
        return sorted(self._dct)

    @implements(ISet.equal)
    def equal(self, other: ISet[T]) -> bool:
        if len(self._dct) != len(other):
            return False
        return all(element in other for element in self._dct)

    @implements(ISet.is_disjoint)
    def is_disjoint(self, other: ISet[T]) -> bool:
        smaller, bigger = self._by_size(other)
        return not any(element in bigger for element in smaller)

    @implements(ISet.is_subset_of)
    def is_subset_of(self, other: ISet[T]) -> bool:
        if len(self._dct) > len(other):
            return False
        return all(element in other for element in self._dct)

    @implements(ISet.is_superset_of)
    def is_superset_of(self, other: ISet[T]) -> bool:
        if len(other) > len(self._dct):
            return False
        return all(element in self._dct for element in other)

    # Set algebra

    def _by_size(self, other: ISet[T]) -> Tuple[ISet[T], ISet[T]]:
        if len(other) < len(self._dct):
            return other, self
        return self, other

    @implements(ISet.difference)
    def difference(self, other: ISet[T]) -> "HashSet[T]":
        return self._new({x: None for x in self._dct if x not in other})

    @implements(ISet.symmetric_difference)
    def symmetric_difference(self, other: ISet[T]) -> "HashSet[T]":
        dct = {x: None for x in self._dct if x not in other}
        dct.update((x, None) for x in other if x not in self._dct)
        return self._new(dct)

    @implements(ISet.intersection)
    def intersection(self, other: ISet[T]) -> "HashSet[T]":
        smaller, bigger = self._by_size(other)
        return self._new({x: None for x in smaller if x in bigger})

    @implements(ISet.union)
    def union(self, other: ISet[T]) -> "HashSet[T]":
        dct = self._dct.copy()
        dct.update((x, None) for x in other)
        return self._new(dct)

    @implements(ISet.unite)
    def unite(self, other: ISet[T]) -> None:
        self._dct.update((x, None) for x in other)

    @implements(ISet.clone)
    def clone(self) -> "HashSet[T]":
        return self._new(self._dct.copy())

    # Iteration

    @implements(ISet.all)
    def all(self) -> Iterator[T]:
        return iter(self._dct)

    @implements(ISet.all_indexed)
    def all_indexed(self, start: int = 0) -> Iterator[Tuple[int, T]]:
        """
        :param start:
            The index given to the first element.

        :return:
            An iterator over (index, element) tuples.
        """
        return enumerate(self._dct, start)

    # Python protocols

    def __iter__(self) -> Iterator[T]:
        return iter(self._dct)

    def __contains__(self, element: object) -> bool:
        return element in self._dct

    def __len__(self) -> int:
        return len(self._dct)

    def __bool__(self) -> bool:
        return bool(self._dct)

    def __eq__(self, other):
        if isinstance(other, HashSet):
            return self.equal(other)
        return NotImplemented

    __hash__ = None  # type: ignore

    def __le__(self, other):
        if isinstance(other, HashSet):
            return self.is_subset_of(other)
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, HashSet):
            return self.is_superset_of(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, HashSet):
            return self.difference(other)
        return NotImplemented

    def __xor__(self, other):
        if isinstance(other, HashSet):
            return self.symmetric_difference(other)
        return NotImplemented

    def __and__(self, other):
        if isinstance(other, HashSet):
            return self.intersection(other)
        return NotImplemented

    def __or__(self, other):
        if isinstance(other, HashSet):
            return self.union(other)
        return NotImplemented

    def __ior__(self, other):
        if isinstance(other, HashSet):
            self.unite(other)
            return self
        return NotImplemented

    def __str__(self) -> str:
        return render(self._dct, len(self._dct), self.display_options)

    def __repr__(self) -> str:
        data = repr(list(self._dct)) if self._dct else ""
        return f"HashSet({data})"

    def __typecheckself__(self) -> None:
        _: ISet[T] = check_implements(self)
