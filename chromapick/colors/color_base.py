from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple
from boundednumbers.functions import clamp
from ..types.color_types import ColorSpace, Scalar


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    mode:          ClassVar[ColorSpace]
    maxima:        ClassVar[Tuple[Scalar, ...]]
    channel_types: ClassVar[Tuple[type, ...]]
    channel_names: ClassVar[Tuple[str, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        if isinstance(value, ColorBase):
            value = value.value
        value = tuple(value)
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(value)}")

        # type enforcement, then clamp value into [0, maximum]
        self._value = tuple(
            clamp(kind(v), kind(0), kind(m))
            for v, kind, m in zip(value, self.channel_types, self.maxima)
        )

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def alpha(self) -> float:
        """Alpha is always the last channel, as a fraction in [0, 1]."""
        return self._value[-1]

    def as_dict(self) -> dict[str, Scalar]:
        return dict(zip(self.channel_names, self._value))

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
