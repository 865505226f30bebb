from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass

from devready.services.checkers import CheckResult, Dependency, DependencyChecker
from devready.services.messages import ResultMessage


@dataclass(frozen=True, slots=True)
class CheckReport:
    results: dict[Dependency, CheckResult]

    def has_missing(self) -> bool:
        return any(not r.installed for r in self.results.values())

    def messages(self) -> list[ResultMessage]:
        return [ResultMessage.for_result(dep, r) for dep, r in self.results.items()]


class CheckService:
    def __init__(self, *, checker: DependencyChecker) -> None:
        self._checker = checker

    async def run(self, dependencies: Iterable[Dependency] | None = None) -> CheckReport:
        selected = list(dependencies) if dependencies is not None else list(Dependency)
        results = await asyncio.gather(*(self._checker.check(dep) for dep in selected))
        return CheckReport(results=dict(zip(selected, results, strict=True)))
