# src/platform_day/config.py
import os
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .domain.offset import OffsetValue

def _env(name: str, default: str):
    # read at load_config() time, not at import
    return lambda: os.getenv(name, default)

class Config(BaseModel):
    # env strings from the factories still go through validation/coercion
    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(default_factory=_env("PLATFORM_API_URL", "http://localhost:5000/api/v1"))
    day_start_key: str = Field(default_factory=_env("PLATFORM_DAY_START_KEY", "platform_day_start_utc"))
    http_timeout_sec: float = Field(default_factory=_env("PLATFORM_HTTP_TIMEOUT_SEC", "10"), gt=0)
    http_retries: int = Field(default_factory=_env("PLATFORM_HTTP_RETRIES", "2"), ge=1)
    cache_ttl_sec: int = Field(default_factory=_env("PLATFORM_DAY_CACHE_TTL_SEC", "300"), ge=0)
    default_day_start: str = Field(default_factory=_env("PLATFORM_DAY_DEFAULT_START", "00:00:00"))
    log_level: str = Field(default_factory=_env("LOG_LEVEL", "INFO"))

    @field_validator("default_day_start")
    @classmethod
    def _check_day_start(cls, v: str) -> str:
        OffsetValue.parse(v)  # InvalidOffsetFormat is a ValueError -> ValidationError
        return v

    @property
    def cache_ttl_ms(self) -> int:
        return self.cache_ttl_sec * 1000

    @property
    def default_offset(self) -> OffsetValue:
        return OffsetValue.parse(self.default_day_start)

def load_config(**overrides) -> Config:
    return Config(**overrides)
