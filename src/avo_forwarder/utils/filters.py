"""Include/exclude filtering for event and property names."""

from __future__ import annotations

from collections.abc import Collection

RESERVED_PREFIX = "$"


class NameFilter:
    """Stateless allow-list / deny-list predicates. All methods are static."""

    @staticmethod
    def is_reserved(name: str) -> bool:
        """True for platform-generated names such as ``$pageview``."""
        return name.startswith(RESERVED_PREFIX)

    @staticmethod
    def should_forward(
        name: str, include: Collection[str], exclude: Collection[str],
    ) -> bool:
        """Decide whether a name passes the filters.

        Reserved names never pass. An empty include set lets everything
        through; otherwise it is an allow-list. Exclude wins over include.
        """
        if NameFilter.is_reserved(name):
            return False
        included = not include or name in include
        excluded = name in exclude
        return included and not excluded
