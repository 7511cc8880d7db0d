"""Basic component interfaces: initialisable parts and outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Initializable(ABC):
    """A component that has to be initialised before use."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the component for use."""


class Output(Initializable):
    """A component that values can be written to, e.g. a vibration motor."""

    @abstractmethod
    def write_state(self, value: Any) -> None:
        """Write ``value`` to the output."""