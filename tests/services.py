"""Sample classes resolved by the test suite through dotted-path identifiers."""

from abc import ABC, abstractmethod
from typing import Protocol


class Clock:
    pass


class Engine:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock


class Car:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine


class Gauge:
    def __init__(self, reading: int, clock: Clock) -> None:
        self.reading = reading
        self.clock = clock


class Timeout:
    def __init__(self, seconds: int = 7) -> None:
        self.seconds = seconds


class Port:
    def __init__(self, number: int) -> None:
        self.number = number


class Untyped:
    def __init__(self, first, second="two") -> None:  # noqa: ANN001
        self.first = first
        self.second = second


class Repository(ABC):
    @abstractmethod
    def fetch(self) -> str: ...


class SqlRepository(Repository):
    def fetch(self) -> str:
        return "sql"


class MemoryRepository(Repository):
    def fetch(self) -> str:
        return "memory"


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class ReportService:
    def __init__(self, repository: Repository) -> None:
        self.repository = repository


class Ping:
    def __init__(self, pong: "Pong") -> None:
        self.pong = pong


class Pong:
    def __init__(self, ping: Ping) -> None:
        self.ping = ping


class SelfReferencing:
    def __init__(self, other: "SelfReferencing") -> None:
        self.other = other
