"""Engine configuration via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

RankGoal = Literal["candidate_score", "valid_end_states"]


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (DRAFTFLOW_*)."""

    model_config = SettingsConfigDict(
        env_prefix="DRAFTFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Search defaults used when a caller omits a parameter
    default_max_depth: int = 4
    default_max_branch: int = 8
    default_min_candidate_score: int = 1
    default_rank_goal: RankGoal = "candidate_score"
    prune_unreachable_required: bool = True

    # Upper bounds; a team only has five slots to fill
    max_depth_limit: int = 5
    max_branch_limit: int = 25
    max_min_candidate_score: int = 1000

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
