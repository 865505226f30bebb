"""Result type for explicit error handling.

Probes, the process primitive and the config loader report failure as a
value instead of raising, so callers decide what "absent" means.

Usage:
    match await run(["node", "-v"]):
        case Ok(output):
            print(output.stdout)
        case Err(error):
            print(f"node failed: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result carrying a value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result carrying an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
