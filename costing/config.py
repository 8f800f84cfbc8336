from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Dockfinity Costing"
    LOG_LEVEL: str = "INFO"

    # Organization-wide circle rate fallback (currency/kg).
    # Used only when an item has no explicit circle rate of its own.
    CIRCLE_BASE_RATE: float = 170.0
    CIRCLE_ADD_PER_KG: float = 5.0
    CIRCLE_EXTRA_ADD_PER_KG: float = 0.0  # e.g. +5 for 0.33mm stock

    # One standard packing bag, by mass
    BAG_STANDARD_KG: float = 80.0

    # Fixed offset added to the resolved circle rate before calculation.
    # 0 disables it; one UI revision used +3.
    CIRCLE_RATE_OFFSET_PER_KG: float = 0.0

    class Config:
        env_file = ".env"


settings = Settings()
