"""Configuration for content-aware chunking.

Defaults can be overridden with environment variables (or a ``.env`` file):

    CHUNK_MAX_SIZE            - maximum chunk size in characters (1000)
    CHUNK_OVERLAP_SIZE        - fixed-length window overlap (100)
    HIERARCHICAL_TARGET_CAP   - ceiling for hierarchical chunk targets (1800)
    EMBEDDING_BATCH_SIZE      - chunks per embedding queue batch (5)
"""

import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_int_env(key: str, default: int) -> int:
    """Get integer environment variable, falling back to default when unset."""
    raw = os.environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {key} must be an integer, got {raw!r}") from e


DEFAULT_MAX_CHUNK_SIZE = 1000
DEFAULT_OVERLAP_SIZE = 100
# Keeps Title/Section context plus content under a 512-token embedding window
DEFAULT_TARGET_CAP = 1800
TARGET_MIN_RATIO = 0.6
DEFAULT_EMBEDDING_BATCH_SIZE = 5

CHUNK_MAX_SIZE = get_int_env("CHUNK_MAX_SIZE", DEFAULT_MAX_CHUNK_SIZE)
CHUNK_OVERLAP_SIZE = get_int_env("CHUNK_OVERLAP_SIZE", DEFAULT_OVERLAP_SIZE)
HIERARCHICAL_TARGET_CAP = get_int_env("HIERARCHICAL_TARGET_CAP", DEFAULT_TARGET_CAP)
EMBEDDING_BATCH_SIZE = get_int_env("EMBEDDING_BATCH_SIZE", DEFAULT_EMBEDDING_BATCH_SIZE)


@dataclass(frozen=True)
class ChunkingConfig:
    """Hierarchical chunk targets for one chunking run."""

    adjusted_target_max: int
    target_min: int

    @classmethod
    def from_sizes(
        cls,
        max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
        target_cap: int | None = None,
    ) -> "ChunkingConfig":
        """Derive hierarchical targets from the requested chunk size.

        Args:
            max_chunk_size: Requested maximum chunk size
            target_cap: Upper bound for the hierarchical target,
                HIERARCHICAL_TARGET_CAP when omitted

        Returns:
            ChunkingConfig with adjusted_target_max and target_min filled in
        """
        if target_cap is None:
            target_cap = HIERARCHICAL_TARGET_CAP
        adjusted = min(max_chunk_size, target_cap)
        return cls(
            adjusted_target_max=adjusted,
            target_min=math.floor(adjusted * TARGET_MIN_RATIO),
        )
