__version__ = "0.1.0"
version_info = [int(x) for x in __version__.split(".")]

from hashset.hash_set import HashSet
from hashset.options import DisplayOptions, DEFAULT_DISPLAY_OPTIONS
from hashset.rendering import FullDisplayPolicy, TruncatingDisplayPolicy

__all__ = [
    "HashSet",
    "DisplayOptions",
    "DEFAULT_DISPLAY_OPTIONS",
    "FullDisplayPolicy",
    "TruncatingDisplayPolicy",
]
