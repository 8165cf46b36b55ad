"""Configuration handling for fmt-utils"""

from dataclasses import dataclass, fields
from typing import Optional

from fmt_utils.constants import OUTPUT_FORMATS


@dataclass
class Config:
    """Configuration for the fmt-utils command line with validation."""

    # Raise on invalid input instead of printing a NaN sentinel
    strict: bool = False

    # Output
    output: str = "text"  # text, json

    # Diagnostics
    verbose: bool = False
    debug: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_flags()
        self._validate_output()
        self._validate_log_file()

    def _validate_flags(self):
        """Validate boolean switches are real booleans."""
        for name in ("strict", "verbose", "debug"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a boolean, got {value!r}")

    def _validate_output(self):
        """Validate output is one of allowed values."""
        if not isinstance(self.output, str):
            raise ValueError(f"output must be a string, got {self.output!r}")
        self.output = self.output.strip().lower()
        if self.output not in OUTPUT_FORMATS:
            raise ValueError(f"output must be one of {OUTPUT_FORMATS}, got '{self.output}'")

    def _validate_log_file(self):
        """Validate log_file is unset or a non-empty path."""
        if self.log_file is None:
            return
        if not isinstance(self.log_file, str) or not self.log_file.strip():
            raise ValueError(f"log_file must be a non-empty path, got {self.log_file!r}")
        self.log_file = self.log_file.strip()

    def to_dict(self) -> dict:
        """Convert config to a plain dictionary."""
        return {
            "strict": self.strict,
            "output": self.output,
            "verbose": self.verbose,
            "debug": self.debug,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
