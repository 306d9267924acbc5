"""
lazysort - Pydantic Models

Configuration models for the lazy sorting adapters.
"""

import os
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator, model_validator
from enum import Enum


class SortStrategy(str, Enum):
    """Selection strategy used to produce the next element"""
    HEAP = "heap"
    PARTITION = "partition"


class PivotPolicy(str, Enum):
    """Pivot choice for the partition strategy"""
    MIDDLE = "middle"
    MEDIAN_OF_THREE = "median_of_three"
    RANDOM = "random"


class LazySortConfig(BaseModel):
    """Options recognised by a lazy sorting adapter"""
    strategy: SortStrategy = Field(
        SortStrategy.HEAP,
        description="Internal selection algorithm (heap or partition)"
    )
    pivot: PivotPolicy = Field(
        PivotPolicy.MEDIAN_OF_THREE,
        description="Pivot policy, only used by the partition strategy"
    )
    seed: Optional[int] = Field(
        None,
        description="Seed for the random pivot policy"
    )
    reverse: bool = Field(
        False,
        description="Emit elements in descending order"
    )

    @field_validator('strategy', 'pivot', mode='before')
    @classmethod
    def normalize_name(cls, v):
        """Accept enum names case-insensitively"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode='after')
    def validate_seed(self):
        """A seed only makes sense for random pivots"""
        if self.seed is not None and self.pivot != PivotPolicy.RANDOM:
            raise ValueError(
                f"seed requires pivot='random', got pivot='{self.pivot.value}'"
            )
        return self

    @classmethod
    def from_env(cls, prefix: str = "LAZYSORT_") -> "LazySortConfig":
        """Build a config from environment variables, keeping defaults for missing ones"""
        values: Dict[str, Any] = {}
        for name in ("strategy", "pivot", "seed"):
            raw = os.environ.get(f"{prefix}{name.upper()}")
            if raw:
                values[name] = raw
        reverse = os.environ.get(f"{prefix}REVERSE")
        if reverse:
            values["reverse"] = reverse.strip().lower() in ("1", "true", "yes", "on")
        return cls(**values)
