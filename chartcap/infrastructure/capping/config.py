"""
Capping configuration state: cap, direction, bucket label and grouper.
"""

import os
import warnings
from typing import Any, Callable, Optional, Union

from .engine import UNBOUNDED, Cap, is_unbounded
from .others import DEFAULT_OTHERS_LABEL


class _DefaultGrouper:
    """Marker for "use the built-in sum grouper"."""

    def __repr__(self) -> str:
        return 'DEFAULT_GROUPER'


DEFAULT_GROUPER = _DefaultGrouper()

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def validate_cap(cap: Any) -> Cap:
    """
    Check a cap value and normalise it.

    Negative caps are clamped to 0 with a UserWarning.

    Raises:
        TypeError: If cap is not an int or UNBOUNDED
    """
    if is_unbounded(cap):
        return UNBOUNDED

    if isinstance(cap, bool) or not isinstance(cap, int):
        raise TypeError(
            f"cap must be an int or UNBOUNDED, got {type(cap).__name__}"
        )

    if cap < 0:
        warnings.warn(
            f"Negative cap {cap} clamped to 0; every category will be collapsed",
            UserWarning
        )
        return 0

    return cap


class CapConfig:
    """
    Mutable capping configuration owned by one chart.

    Every field is changed only through its setter; the capping transform
    reads it but never writes it.

    Args:
        cap: Number of categories to keep, or UNBOUNDED (default)
        take_front: Keep the highest-ranked prefix (True, default) or the suffix
        others_label: Key of the synthetic bucket (default: "Others")
        others_grouper: fn(kept, collapsed) -> items, None to drop the
            remainder, or DEFAULT_GROUPER (default) for the sum bucket
    """

    def __init__(
        self,
        cap: Cap = UNBOUNDED,
        take_front: bool = True,
        others_label: Any = DEFAULT_OTHERS_LABEL,
        others_grouper: Union[Callable, None, _DefaultGrouper] = DEFAULT_GROUPER
    ):
        self.cap = cap
        self.take_front = take_front
        self.others_label = others_label
        self.others_grouper = others_grouper

    @property
    def cap(self) -> Cap:
        return self._cap

    @cap.setter
    def cap(self, value: Cap) -> None:
        self._cap = validate_cap(value)

    @property
    def take_front(self) -> bool:
        return self._take_front

    @take_front.setter
    def take_front(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"take_front must be a bool, got {type(value).__name__}")
        self._take_front = value

    @property
    def others_label(self) -> Any:
        return self._others_label

    @others_label.setter
    def others_label(self, value: Any) -> None:
        self._others_label = value

    @property
    def others_grouper(self) -> Union[Callable, None, _DefaultGrouper]:
        return self._others_grouper

    @others_grouper.setter
    def others_grouper(self, value: Union[Callable, None, _DefaultGrouper]) -> None:
        if value is not None and value is not DEFAULT_GROUPER and not callable(value):
            raise TypeError(
                f"others_grouper must be callable, None or DEFAULT_GROUPER, "
                f"got {type(value).__name__}"
            )
        self._others_grouper = value

    @classmethod
    def from_env(cls, prefix: str = 'CHARTCAP_') -> 'CapConfig':
        """
        Build a configuration from environment variables.

        Reads {prefix}CAP (int; empty or 'inf' for unbounded),
        {prefix}TAKE_FRONT (true/false) and {prefix}OTHERS_LABEL. Unset
        variables keep their defaults. Call chartcap.configure() first to load
        a .env file.

        Raises:
            ValueError: If a variable holds an unparseable value
        """
        config = cls()

        raw_cap = os.getenv(f'{prefix}CAP', '').strip()
        if raw_cap and raw_cap.lower() not in ('inf', 'infinity', 'unbounded'):
            try:
                config.cap = int(raw_cap)
            except ValueError:
                raise ValueError(
                    f"{prefix}CAP must be an integer or 'inf', got '{raw_cap}'"
                ) from None

        raw_take_front = os.getenv(f'{prefix}TAKE_FRONT', '').strip().lower()
        if raw_take_front in _TRUE_VALUES:
            config.take_front = True
        elif raw_take_front in _FALSE_VALUES:
            config.take_front = False
        elif raw_take_front:
            raise ValueError(
                f"{prefix}TAKE_FRONT must be true or false, got '{raw_take_front}'"
            )

        label: Optional[str] = os.getenv(f'{prefix}OTHERS_LABEL')
        if label:
            config.others_label = label

        return config

    def __repr__(self) -> str:
        return (
            f"CapConfig(cap={self.cap!r}, take_front={self.take_front!r}, "
            f"others_label={self.others_label!r}, others_grouper={self.others_grouper!r})"
        )
