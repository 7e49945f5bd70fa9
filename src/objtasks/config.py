from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjtasksConfig:
    log_level: str = "WARNING"
    json_ensure_ascii: bool = False
    collation: str = "unicode"  # "unicode" or "locale"

    def __post_init__(self) -> None:
        if self.collation not in ("unicode", "locale"):
            raise ValueError(f"Unknown collation: {self.collation!r}")


DEFAULT_CONFIG = ObjtasksConfig()
