"""Runtime knobs for the predicate dispatcher."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class KernelConfig:
    """Tunables that do not change the EPS comparison discipline."""

    # distance past the polygon max-x where point-in-polygon rays end
    ray_margin: float = 1e3
    # |det| at or below this treats two implicit lines as parallel
    parallel_tolerance: float = 1e-12


_KERNEL_CONFIG = KernelConfig()


def get_kernel_config() -> KernelConfig:
    return copy.deepcopy(_KERNEL_CONFIG)


def set_kernel_config(config: KernelConfig) -> None:
    global _KERNEL_CONFIG
    if config.ray_margin <= 0.0:
        raise ValueError("ray_margin must be positive")
    if config.parallel_tolerance < 0.0:
        raise ValueError("parallel_tolerance must be non-negative")
    _KERNEL_CONFIG = copy.deepcopy(config)


def current_config() -> KernelConfig:
    """Return the live configuration without copying (read-only use)."""

    return _KERNEL_CONFIG


__all__ = ["KernelConfig", "get_kernel_config", "set_kernel_config", "current_config"]
