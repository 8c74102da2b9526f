"""
Hint provider registry.

Providers register against language ids with a priority; lower priorities
are tried first, and equal priorities keep registration order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from xqueryls.hints.provider import HintProvider


@dataclass(frozen=True)
class ProviderRegistration:
    provider: HintProvider
    language_ids: frozenset[str]
    priority: int
    order: int


class HintProviderRegistry:
    def __init__(self) -> None:
        self._registrations: list[ProviderRegistration] = []

    def register(
        self,
        provider: HintProvider,
        language_ids: Iterable[str],
        priority: int = 0,
    ) -> None:
        """Register a provider; registering the same provider again is ignored."""
        if any(r.provider is provider for r in self._registrations):
            return

        self._registrations.append(
            ProviderRegistration(
                provider=provider,
                language_ids=frozenset(language_ids),
                priority=priority,
                order=len(self._registrations),
            )
        )

    def providers_for(self, language_id: str) -> list[HintProvider]:
        matching = [r for r in self._registrations if language_id in r.language_ids]
        matching.sort(key=lambda r: (r.priority, r.order))
        return [r.provider for r in matching]

    def all_providers(self) -> list[HintProvider]:
        return [r.provider for r in self._registrations]
