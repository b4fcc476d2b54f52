"""Events consumed by the phase event loop."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    """The clock advanced."""

    at: float


@dataclass(frozen=True)
class KeyPress:
    """A single key read from the terminal."""

    key: str


@dataclass(frozen=True)
class Resize:
    """The terminal changed size."""

    width: int
    height: int
