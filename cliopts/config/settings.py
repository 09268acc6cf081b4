# cliopts/config/settings.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cliopts.utils.help_formatter import HelpLayout


class Settings(BaseSettings):
    """
    Settings for the demo program and help rendering, loaded from the
    environment (.env). Option values never come from here.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # General
    debug: bool = Field(False, validation_alias="CLIOPTS_DEBUG")

    # Logging / paths
    logs_dir: str = Field(".logs", validation_alias="CLIOPTS_LOGS_DIR")
    log_to_file: bool = Field(False, validation_alias="CLIOPTS_LOG_TO_FILE")

    # Help layout
    help_min_short_width: int = Field(2, ge=0, validation_alias="CLIOPTS_HELP_MIN_SHORT_WIDTH")
    help_min_long_width: int = Field(16, ge=0, validation_alias="CLIOPTS_HELP_MIN_LONG_WIDTH")
    help_column_gap: int = Field(4, ge=1, validation_alias="CLIOPTS_HELP_COLUMN_GAP")

    def help_layout(self) -> HelpLayout:
        return HelpLayout(
            min_short_width=self.help_min_short_width,
            min_long_width=self.help_min_long_width,
            column_gap=self.help_column_gap,
        )
