from pydantic_settings import BaseSettings


class PostProcessSettings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8003
    include_timestamps: bool = False
    log_level: str = "INFO"

    model_config = {"env_prefix": "POSTPROCESS_"}
