"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PATTERN = "*"
DEFAULT_TOP_N = 5


@dataclass(slots=True)
class AppConfig:
    pattern: str = DEFAULT_PATTERN
    max_files: int = 0
    top_n: int = DEFAULT_TOP_N

    def __post_init__(self) -> None:
        if not self.pattern or not self.pattern.strip():
            self.pattern = DEFAULT_PATTERN
        else:
            self.pattern = self.pattern.strip()
        # a negative limit means "no limit", same as 0
        if self.max_files < 0:
            self.max_files = 0
        if self.top_n < 1:
            raise ValueError("top_n must be at least 1")

    @property
    def limit_label(self) -> str:
        return "unlimited" if self.max_files == 0 else str(self.max_files)
