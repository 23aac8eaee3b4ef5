"""Application configuration models.

The whole configuration is one pydantic document persisted as JSON by
ConfigService. The energy profile lives here because it is a per-user
singleton that the scoring and weekly code only read.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .profile import EnergyProfile


class ScoringConfig(BaseModel):
    """Weights for the hybrid score and sizing of the daily playlist."""

    opportunity_weight: int = Field(default=70, ge=0)
    energy_weight: int = Field(default=30, ge=0)
    playlist_effort_threshold: int = Field(default=10, ge=0)
    playlist_size_busy: int = Field(default=3, ge=1)
    playlist_size: int = Field(default=5, ge=1)

    @field_validator("energy_weight")
    @classmethod
    def validate_weights(cls, v: int, info) -> int:
        """Reject an all-zero weight pair."""
        if v == 0 and info.data.get("opportunity_weight", 0) == 0:
            raise ValueError("opportunity_weight and energy_weight cannot both be 0")
        return v


class BehaviorConfig(BaseModel):
    """Behaviour toggles carried over from the app settings screen."""

    auto_archive: bool = Field(default=True)
    auto_archive_days: int = Field(default=30, ge=1)
    enable_energy_tracking: bool = Field(default=True)
    energy_check_interval_minutes: int = Field(default=60, ge=5)
    enable_reality_check: bool = Field(default=True)


class SearchConfig(BaseModel):
    """Search configuration."""

    default_limit: int = Field(default=10, ge=1)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")
    compact: bool = Field(default=False)


class AppConfig(BaseModel):
    """Main tempo configuration."""

    profile: EnergyProfile = Field(default_factory=EnergyProfile)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    settings: BehaviorConfig = Field(default_factory=BehaviorConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    database_path: str | None = Field(
        default=None, description="SQLite file; defaults to the user data dir"
    )
