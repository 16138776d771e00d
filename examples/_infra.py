from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from seqkit import Vector  # noqa: E402


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    city: str
    age: int
    is_active: bool = True


def sample_users() -> Vector[User]:
    return Vector.of(
        User(id=1, name="ada", city="london", age=36),
        User(id=2, name="linus", city="helsinki", age=28),
        User(id=3, name="grace", city="london", age=45, is_active=False),
        User(id=4, name="guido", city="amsterdam", age=28),
        User(id=5, name="barbara", city="helsinki", age=51),
    )


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
