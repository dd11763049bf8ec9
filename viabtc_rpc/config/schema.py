"""Configuration schema using Pydantic.

Persisted to ~/.viabtc_rpc/config.json; every field can also come from the
environment, e.g. VIABTC_ENGINE__PORT=18080.
"""

from pydantic import BaseModel, Field, ConfigDict
from pydantic_settings import BaseSettings


class EngineConfig(BaseModel):
    """Trading engine endpoint."""
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    timeout: float | None = Field(default=None, gt=0)  # Seconds; None keeps the httpx default

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


class Config(BaseSettings):
    """Root configuration for viabtc_rpc."""
    engine: EngineConfig = Field(default_factory=EngineConfig)

    model_config = ConfigDict(
        env_prefix="VIABTC_",
        env_nested_delimiter="__"
    )
