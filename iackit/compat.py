"""Python dependency compatibility handling."""

import sys
from functools import cached_property

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self

__all__ = ["Self", "cached_property"]
