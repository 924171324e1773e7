from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "WS_", "env_file": ".env", "env_file_encoding": "utf-8"}

    llm_provider: str = Field(default="openai", pattern=r"^(openai|anthropic)$")
    llm_model: str = Field(default="gpt-4o")
    llm_max_tokens: int = Field(default=1000, gt=0)
    llm_timeout: float | None = Field(default=None, gt=0)
    openai_api_key: str = Field(default="")
    anthropic_api_key: str = Field(default="")
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", pattern=r"^(json|console)$")
    cors_allow_origin: str = Field(default="*")
    cors_allow_headers: str = Field(default="authorization, x-client-info, apikey, content-type")

    # Request handling
    strict_requests: bool = Field(default=False)
    expose_source_header: bool = Field(default=True)


settings = Settings()
