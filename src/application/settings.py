"""Console configuration.

Immutable settings resolved once from command-line options.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConsoleSettings(BaseModel):
    """Where the console keeps its files and how loudly it logs.

    Each collection is stored twice, as <stem>.bin and <stem>.txt. On start
    the binary file wins; the text file is the fallback.
    """

    data_dir: Path = Path(".")
    antennas_stem: str = Field(default="antenas", min_length=1)
    graph_stem: str = Field(default="grafo", min_length=1)
    log_level: str = "WARNING"

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)

    @property
    def antennas_bin(self) -> Path:
        return self.data_dir / f"{self.antennas_stem}.bin"

    @property
    def antennas_txt(self) -> Path:
        return self.data_dir / f"{self.antennas_stem}.txt"

    @property
    def graph_bin(self) -> Path:
        return self.data_dir / f"{self.graph_stem}.bin"

    @property
    def graph_txt(self) -> Path:
        return self.data_dir / f"{self.graph_stem}.txt"
