from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (and an optional .env).

    These are the only values read from the process environment. Stages
    never consult os.environ directly; resolve_target() folds what it
    needs from here into an immutable DeploymentTarget.

    Environment variables
    ─────────────────────
    • AWS_DEFAULT_REGION  — region fallback when --region is not given
    • GO_BINARY           — compiler executable (default: "go")
    • VERIFY_UPLOAD       — wait for the S3 object to be visible before
                            updating the function (default: false)
    • DEBUG               — coloured console logs instead of JSON
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AWS
    aws_default_region: str = ""

    # Toolchain
    go_binary: str = "go"

    @field_validator("go_binary", mode="before")
    @classmethod
    def default_blank_go_binary(cls, v: str) -> str:
        return v.strip() if v and v.strip() else "go"

    # Pipeline
    verify_upload: bool = False

    # App
    debug: bool = False


def get_settings() -> Settings:
    return Settings()
