"""Configuration management for scripture-tui."""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional


CONFIG_DIR = Path.home() / ".config" / "scripture-tui"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_LINE_WIDTH = 80
MIN_LINE_WIDTH = 20


@dataclass
class Config:
    """Display and context options.

    A ``max_line_width`` of None means the terminal width, or
    DEFAULT_LINE_WIDTH where there is no terminal.
    """

    max_line_width: Optional[int] = None
    context_before: int = 0
    context_after: int = 0
    whole_chapter: bool = False
    corpus_path: Optional[str] = None
    use_pager: bool = True

    def validate(self) -> None:
        """Check option ranges.

        Raises:
            ValueError: On negative context counts or a too narrow width
        """
        if self.context_before < 0:
            raise ValueError(f"context_before must not be negative: {self.context_before}")
        if self.context_after < 0:
            raise ValueError(f"context_after must not be negative: {self.context_after}")
        if self.max_line_width is not None and self.max_line_width < MIN_LINE_WIDTH:
            raise ValueError(f"max_line_width must be at least {MIN_LINE_WIDTH}: {self.max_line_width}")

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create from dictionary, ignoring unknown keys."""
        width = data.get("max_line_width")
        return cls(
            max_line_width=None if width is None else int(width),
            context_before=int(data.get("context_before", 0)),
            context_after=int(data.get("context_after", 0)),
            whole_chapter=bool(data.get("whole_chapter", False)),
            corpus_path=data.get("corpus_path"),
            use_pager=bool(data.get("use_pager", True)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "Config":
        """Load config from file, or return defaults."""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                return cls.from_dict(json.load(f))
        except (json.JSONDecodeError, OSError, TypeError, ValueError, AttributeError):
            return cls()

    def save(self, path: Path = CONFIG_FILE) -> None:
        """Save config to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
