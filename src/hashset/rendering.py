"""
Rendering of sets as `{e1 e2 ... en}`.

How a set is rendered is decided by 3 independent choices (bundled in
`hashset.options.DisplayOptions`):

- the display policy: whether the elements are enumerated at all
  (`FullDisplayPolicy` always enumerates, `TruncatingDisplayPolicy` shows
  `{…N elements…}` when there are more than `max_elements` elements).
- whether the elements are sorted before being shown.
- how each element is formatted (`repr` by default, so, strings are shown
  quoted and numbers in their usual form).
"""
from typing import Any, Iterable, List

from hashset.basic import implements
from hashset.hashset_log import get_logger
from hashset.protocols import IDisplayOptions, IDisplayPolicy, check_implements


log = get_logger(__name__)

DEFAULT_MAX_DISPLAY_ELEMENTS = 100


class FullDisplayPolicy(object):
    """
    Always renders every element.
    """

    __slots__ = ()

    @implements(IDisplayPolicy.should_enumerate)
    def should_enumerate(self, count: int) -> bool:
        return True

    @implements(IDisplayPolicy.summary)
    def summary(self, count: int) -> str:
        return f"{{…{count} elements…}}"

    def __eq__(self, other):
        return isinstance(other, FullDisplayPolicy)

    def __hash__(self):
        return hash(FullDisplayPolicy)

    def __repr__(self):
        return "FullDisplayPolicy()"

    def __typecheckself__(self) -> None:
        _: IDisplayPolicy = check_implements(self)


class TruncatingDisplayPolicy(object):
    """
    Renders `{…N elements…}` instead of the elements when there are more
    than `max_elements` of them.
    """

    __slots__ = ("max_elements",)

    def __init__(self, max_elements: int = DEFAULT_MAX_DISPLAY_ELEMENTS) -> None:
        if max_elements < 0:
            raise ValueError(
                f"Expected max_elements to be >= 0. Found: {max_elements}"
            )
        self.max_elements = max_elements

    @implements(IDisplayPolicy.should_enumerate)
    def should_enumerate(self, count: int) -> bool:
        return count <= self.max_elements

    @implements(IDisplayPolicy.summary)
    def summary(self, count: int) -> str:
        return f"{{…{count} elements…}}"

    def __eq__(self, other):
        if isinstance(other, TruncatingDisplayPolicy):
            return self.max_elements == other.max_elements
        return False

    def __hash__(self):
        return hash((TruncatingDisplayPolicy, self.max_elements))

    def __repr__(self):
        return f"TruncatingDisplayPolicy(max_elements={self.max_elements})"

    def __typecheckself__(self) -> None:
        _: IDisplayPolicy = check_implements(self)


def sorted_if_possible(elements: Iterable[Any]) -> List[Any]:
    """
    :return:
        The elements sorted in ascending order or (when they can't be
        compared with each other) in the order in which they were given.
    """
    elements = list(elements)
    try:
        return sorted(elements)
    except TypeError:
        log.debug(
            "Unable to sort %s elements for display (keeping iteration order).",
            len(elements),
        )
        return elements


def render(elements: Iterable[Any], count: int, options: IDisplayOptions) -> str:
    """
    :param elements:
        The elements to render (only iterated if they're enumerated).

    :param count:
        The number of elements.
    """
    if not options.policy.should_enumerate(count):
        return options.policy.summary(count)

    if options.sort_elements:
        elements = sorted_if_possible(elements)

    fmt = options.format_element
    return "{" + " ".join(fmt(e) for e in elements) + "}"
