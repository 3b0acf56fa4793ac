from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Encoder settings loaded from GEOJSON_ASSEMBLER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='GEOJSON_ASSEMBLER_',
        case_sensitive=False,
        extra='ignore',
    )

    # Validate every assembled document against the pydantic schemas
    validate_output: bool = False

    # Reject calls mixing 2D and 3D positions
    strict_dimensions: bool = True


settings = Settings()
