from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    combinators: tuple[str, ...] = (" ", "+", "~", ">")
    strict_combinators: bool = False  # reject tokens not in ``combinators``
    log_level: str = "WARNING"
