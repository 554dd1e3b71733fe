"""
Benchmark configuration.
"""

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import List, Optional

from othello_search.search.registry import Algorithm

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkConfig:
    """Configuration for a principal-variation benchmark run.

    This dataclass encapsulates the engine selection, search limits and
    reporting switches in one place for easy experimentation and
    reproducibility.
    """

    # Engine
    algorithm: Algorithm = Algorithm.NEGAMAX
    """Engine to run: number 1-4, name, or Algorithm"""

    depth: int = 33
    """Search depth for every position on the line"""

    # Transposition table
    use_tt: bool = False
    """Let the engines record their values in a transposition table"""

    tt_max_size: Optional[int] = None
    """Maximum TT entries (None = grow until memory runs out)"""

    tt_min_depth: int = 32
    """Only store entries searched with at least this remaining depth"""

    # Line
    principal_variation: Optional[List[int]] = None
    """Move indices of the line to replay (None = default line); -1 terminates"""

    max_positions: Optional[int] = None
    """Stop after this many positions, counted from the end of the line"""

    # Reporting
    show_boards: bool = False
    """Print each position before it is searched"""

    progress: bool = True
    """Show a progress bar over the positions"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.algorithm = Algorithm.parse(self.algorithm)

        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")

        if self.tt_max_size is not None and self.tt_max_size <= 0:
            raise ValueError(f"tt_max_size must be positive, got {self.tt_max_size}")

        if self.tt_min_depth < 0:
            raise ValueError(f"tt_min_depth must be non-negative, got {self.tt_min_depth}")

        if self.max_positions is not None and self.max_positions <= 0:
            raise ValueError(f"max_positions must be positive, got {self.max_positions}")

        if self.principal_variation is not None:
            self.principal_variation = [int(move) for move in self.principal_variation]

    @classmethod
    def from_toml(cls, path: str | Path = "benchmark.toml", **overrides) -> "BenchmarkConfig":
        """
        Load settings from the [benchmark] table of a TOML file.

        Unknown keys are ignored with a warning. Keyword overrides win over
        the file. A missing file yields the defaults.

        Args:
            path: TOML file path
            **overrides: Field values taking precedence over the file

        Returns:
            BenchmarkConfig
        """
        path = Path(path)
        values = {}
        if path.exists():
            with open(path, "rb") as f:
                data = tomllib.load(f)
            known = {f.name for f in fields(cls)}
            for key, value in data.get("benchmark", {}).items():
                if key in known:
                    values[key] = value
                else:
                    logger.warning(f"Ignoring unknown benchmark setting: {key}")
        else:
            logger.debug(f"Config file not found, using defaults: {path}")

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"BenchmarkConfig(\n"
            f"  Algorithm: {self.algorithm.display_name}, depth={self.depth}\n"
            f"  Transposition table: {self.use_tt} "
            f"(max_size={self.tt_max_size}, min_depth={self.tt_min_depth})\n"
            f"  Line: {'default' if self.principal_variation is None else len(self.principal_variation)}"
            f", max_positions={self.max_positions}\n"
            f")"
        )
