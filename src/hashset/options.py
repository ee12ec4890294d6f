import os
from typing import Any, Callable, Optional

from hashset.hashset_log import get_logger
from hashset.protocols import IDisplayOptions, IDisplayPolicy, check_implements
from hashset.rendering import (
    DEFAULT_MAX_DISPLAY_ELEMENTS,
    FullDisplayPolicy,
    TruncatingDisplayPolicy,
)


log = get_logger(__name__)

# Options which may be set as environment variables.

# The number of elements above which a set is rendered as `{…N elements…}`.
# 0 means that sets are never truncated.
ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS = "HASHSET_MAX_DISPLAY_ELEMENTS"

# Whether elements are sorted when rendered (on by default).
ENV_OPTION_HASHSET_SORT_DISPLAY = "HASHSET_SORT_DISPLAY"

_TRUE_VALUES = ("1", "True", "true")
_FALSE_VALUES = ("0", "False", "false")


def is_true_in_env(env_key, default=False):
    """
    :param str env_key:

    :return bool:
        True if the given key is to be considered to have a value which is to be
        considered True and False otherwise (`default` is used if the key is
        not set or has some other value).
    """
    value = os.getenv(env_key, "")
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_int_from_env(env_key, default):
    """
    :raises ValueError:
        If the variable is set to something which isn't an integer.
    """
    value = os.getenv(env_key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(
            f"Expected {env_key} to be an integer. Found: {value!r}"
        ) from None


def create_display_policy(max_elements: int) -> IDisplayPolicy:
    """
    :param max_elements:
        0 to always show all the elements, otherwise the number of elements
        above which only a summary is shown.
    """
    if max_elements == 0:
        return FullDisplayPolicy()
    return TruncatingDisplayPolicy(max_elements)


class DisplayOptions(object):
    """
    Decides how a `HashSet` is rendered by `str()`.

    The canonical policy is to truncate sets with more than 100 elements to
    `{…N elements…}`, sort the elements when they're orderable and show
    each element with `repr` (so, strings are quoted).
    """

    __slots__ = ("policy", "sort_elements", "format_element")

    def __init__(
        self,
        policy: Optional[IDisplayPolicy] = None,
        sort_elements: bool = True,
        format_element: Callable[[Any], str] = repr,
    ) -> None:
        if policy is None:
            policy = TruncatingDisplayPolicy(DEFAULT_MAX_DISPLAY_ELEMENTS)
        self.policy = policy
        self.sort_elements = sort_elements
        self.format_element = format_element

    @classmethod
    def from_env(cls) -> "DisplayOptions":
        """
        :raises ValueError:
            If some environment variable has an invalid value.
        """
        max_elements = get_int_from_env(
            ENV_OPTION_HASHSET_MAX_DISPLAY_ELEMENTS, DEFAULT_MAX_DISPLAY_ELEMENTS
        )
        return cls(
            policy=create_display_policy(max_elements),
            sort_elements=is_true_in_env(ENV_OPTION_HASHSET_SORT_DISPLAY, True),
        )

    def copy(self, **kwargs) -> "DisplayOptions":
        """
        :return:
            A copy of these options with the given attributes replaced.
        """
        new_kwargs = {
            "policy": self.policy,
            "sort_elements": self.sort_elements,
            "format_element": self.format_element,
        }
        new_kwargs.update(kwargs)
        return DisplayOptions(**new_kwargs)

    def __eq__(self, other):
        if isinstance(other, DisplayOptions):
            return (
                self.policy == other.policy
                and self.sort_elements == other.sort_elements
                and self.format_element == other.format_element
            )
        return False

    __hash__ = None  # type: ignore

    def __repr__(self):
        return (
            f"DisplayOptions(policy={self.policy!r}, "
            f"sort_elements={self.sort_elements!r}, "
            f"format_element={self.format_element!r})"
        )

    def __typecheckself__(self) -> None:
        _: IDisplayOptions = check_implements(self)


def _create_default_display_options() -> DisplayOptions:
    try:
        return DisplayOptions.from_env()
    except ValueError:
        log.exception("Invalid display configuration in the environment.")
        return DisplayOptions()


DEFAULT_DISPLAY_OPTIONS = _create_default_display_options()
