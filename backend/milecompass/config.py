from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    env: str = "dev"
    log_level: str = "INFO"

    # Upstream offer source
    use_real_api: bool = False
    offer_source_url: str = ""
    offer_source_api_key: str = ""
    upstream_timeout_seconds: float = 30.0

    # Result shaping
    result_limit: int = 10
    all_slots_result_limit: int = 20
    diversification_cap: int = 2
    chart_update_notice_limit: int = 3

    def model_post_init(self, __context):
        if self.env == "prod" and self.use_real_api and not self.offer_source_url:
            raise ValueError(
                "Production with USE_REAL_API requires an explicit OFFER_SOURCE_URL"
            )

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
