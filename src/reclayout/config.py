from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

SUPPORTED_FORMATS = ("text", "json", "csv", "arrow")
FORMAT_SUFFIXES = {"json": ".json", "csv": ".csv", "arrow": ".arrow"}
TRUE_WORDS = {"true", "yes", "on", "1"}
FALSE_WORDS = {"false", "no", "off", "0"}


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in TRUE_WORDS | FALSE_WORDS:
        return value.strip().lower() in TRUE_WORDS
    raise ValueError(f"Config key '{key}' must be a boolean, got {value!r}.")


@dataclass
class LayoutConfig:
    strict: bool = False  # raise on content lines that are not field declarations
    output_format: str = "text"
    output_suffix: str = ".RL"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.strict = _as_bool(self.strict, "strict")
        if not self.output_suffix.startswith(".") or len(self.output_suffix) < 2:
            raise ValueError(
                f"Output suffix must start with '.', got '{self.output_suffix}'."
            )
        self.output_format = self.output_format.lower()
        if self.output_format not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format '{self.output_format}'. Choose from {SUPPORTED_FORMATS}."
            )

    @staticmethod
    def from_mapping(payload: dict[str, Any]) -> LayoutConfig:
        known = {f.name for f in fields(LayoutConfig)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return LayoutConfig(
            strict=payload.get("strict", False),
            output_format=str(payload.get("output_format", "text")),
            output_suffix=str(payload.get("output_suffix", ".RL")),
            encoding=str(payload.get("encoding", "utf-8")),
        )

    def suffix_for(self, output_format: str | None = None) -> str:
        """File suffix for a format; the report itself uses ``output_suffix``."""
        fmt = (output_format or self.output_format).lower()
        return FORMAT_SUFFIXES.get(fmt, self.output_suffix)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config(path: Path) -> LayoutConfig:
    if path.suffix.lower() in {".yml", ".yaml"}:
        payload = yaml.safe_load(path.read_text())
    else:
        payload = json.loads(path.read_text())
    return LayoutConfig.from_mapping(payload or {})


def sample_config() -> dict[str, Any]:
    return LayoutConfig().to_dict()
