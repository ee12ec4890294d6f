from typing import Any, Callable, Iterator, Tuple, TypeVar
from typing import Protocol


T = TypeVar("T")


def check_implements(x: T) -> T:
    """
    Helper to check if a class implements some protocol.

    :important: It must be the last method in a class due to
                https://github.com/python/mypy/issues/9266

        Example:

    def __typecheckself__(self) -> None:
        _: IExpectedProtocol = check_implements(self)

    Mypy should complain if `self` is not implementing the IExpectedProtocol.
    """
    return x


class ILog(Protocol):
    def critical(self, msg: str = "", *args: Any):
        pass

    def info(self, msg: str = "", *args: Any):
        pass

    def warn(self, msg: str = "", *args: Any):
        pass  # same as info

    def warning(self, msg: str = "", *args: Any):
        pass  # same as info

    def debug(self, msg: str = "", *args: Any):
        pass

    def exception(self, msg: str = "", *args: Any):
        pass

    def error(self, msg: str = "", *args: Any):
        pass  # same as exception


class IDisplayPolicy(Protocol):
    def should_enumerate(self, count: int) -> bool:
        """
        :return:
            True if a set with `count` elements should render each element and
            False if it should render only the summary.
        """

    def summary(self, count: int) -> str:
        """
        :return:
            The text shown when the elements are not enumerated.
        """


class IDisplayOptions(Protocol):
    policy: IDisplayPolicy
    sort_elements: bool
    format_element: Callable[[Any], str]


class ISet(Protocol[T]):
    """
    The contract shared by the containers of this package (and any peer
    container, such as one with sorted iteration).
    """

    def add(self, *elements: T) -> None:
        pass

    def delete(self, *elements: T) -> None:
        pass

    def clear(self) -> None:
        pass

    def contains(self, element: T) -> bool:
        pass

    def is_empty(self) -> bool:
        pass

    def to_list(self) -> list:
        pass

    def equal(self, other: "ISet[T]") -> bool:
        pass

    def is_disjoint(self, other: "ISet[T]") -> bool:
        pass

    def is_subset_of(self, other: "ISet[T]") -> bool:
        pass

    def is_superset_of(self, other: "ISet[T]") -> bool:
        pass

    def difference(self, other: "ISet[T]") -> "ISet[T]":
        pass

    def symmetric_difference(self, other: "ISet[T]") -> "ISet[T]":
        pass

    def intersection(self, other: "ISet[T]") -> "ISet[T]":
        pass

    def union(self, other: "ISet[T]") -> "ISet[T]":
        pass

    def unite(self, other: "ISet[T]") -> None:
        pass

    def clone(self) -> "ISet[T]":
        pass

    def all(self) -> Iterator[T]:
        pass

    def all_indexed(self, start: int = 0) -> Iterator[Tuple[int, T]]:
        pass

    def __len__(self) -> int:
        pass

    def __iter__(self) -> Iterator[T]:
        pass

    def __contains__(self, element: object) -> bool:
        pass

