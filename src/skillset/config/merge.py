"""Declarative layer merge for configuration mappings."""

from __future__ import annotations

from typing import Any

from skillset.constants.config import CONFIG_MERGE_STRATEGIES, MergeStrategy


def merge_configs(
    base: dict[str, Any],
    overlay: dict[str, Any],
    strategies: dict[str, MergeStrategy] | None = None,
) -> dict[str, Any]:
    """Return ``overlay`` merged over ``base`` using the per-key ``strategies``.

    ``replace`` and ``replace_list`` take the overlay value when present;
    ``merge_keys`` combines two mappings with overlay keys winning. Unlisted
    keys are replaced.
    """
    if strategies is None:
        strategies = CONFIG_MERGE_STRATEGIES
    merged = dict(base)
    for key, value in overlay.items():
        strategy = strategies.get(key, "replace")
        if strategy == "merge_keys" and isinstance(value, dict):
            existing = base.get(key)
            merged[key] = {**(existing if isinstance(existing, dict) else {}), **value}
        else:
            merged[key] = value
    return merged
