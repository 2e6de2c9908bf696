"""Bundled sample copybooks for trying the generator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SAMPLES_DIR = Path(__file__).parent / "sample_copybooks"

DESCRIPTIONS = {
    "SYSDATES": "Simple date structure with COMP-3 fields",
    "DINC": "Complex structure with nested OCCURS clauses",
    "SALES": "Sales data with various field types",
}


@dataclass
class Sample:
    name: str
    description: str
    path: Path


def list_samples() -> list[Sample]:
    return [
        Sample(name=path.stem, description=DESCRIPTIONS.get(path.stem, ""), path=path)
        for path in sorted(SAMPLES_DIR.glob("*.cpy"))
    ]


def sample_path(name: str) -> Path:
    path = SAMPLES_DIR / f"{name.upper()}.cpy"
    if not path.is_file():
        raise KeyError(f"Unknown sample '{name}'")
    return path


def load_sample(name: str) -> str:
    return sample_path(name).read_text()
