from dataclasses import dataclass
from typing import Protocol


class RankedRecord(Protocol):
    popularity: int


@dataclass
class Series:
    title: str
    popularity: int
