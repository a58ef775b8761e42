from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class Size:
    name: str
    price: int


@dataclass(frozen=True, slots=True)
class Topping:
    name: str
    price: int
    vegan: bool = True


SIZES = (Size("small", 800), Size("medium", 1000), Size("large", 1300))
CRUSTS = ("thin", "classic")
TOPPINGS = (Topping("basil", 50), Topping("salami", 200, vegan=False), Topping("olives", 120))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
