"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from flexsight.engine.config import LayoutConfig
from flexsight.engine.enums import BuildStage
from flexsight.engine.spatial_constants import DEFAULT_TOLERANCE


class Settings(BaseSettings):
    log_level: str = "info"

    # Layout defaults
    tolerance: float = DEFAULT_TOLERANCE
    multi_line_text_fixed_width: bool = False
    build_stage: BuildStage = BuildStage.FULL
    strict: bool = True

    model_config = {"env_prefix": "FLEXSIGHT_", "env_file": ".env", "env_file_encoding": "utf-8"}

    def layout_config(self) -> LayoutConfig:
        return LayoutConfig(
            tolerance=self.tolerance,
            multi_line_text_fixed_width=self.multi_line_text_fixed_width,
            build_stage=self.build_stage,
            strict=self.strict,
        )


settings = Settings()
