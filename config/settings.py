from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# CNB exchange rate API
	CNB_API_BASE_URL: str | None = None
	CNB_DAILY_RATES_ENDPOINT: str | None = None
	CNB_TARGET_CURRENCY_CODE: str = 'CZK'
	CNB_TIMEOUT_SECONDS: int = 30
	CNB_RETRY_COUNT: int = 3

	# Currencies the console program asks for when none are given
	DEFAULT_CURRENCIES: list[str] = ['USD', 'EUR', 'CZK', 'JPY', 'KES', 'RUB', 'THB', 'TRY', 'XYZ']

	# Application
	APP_NAME: str = 'CNB Exchange Rate Updater'
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False
	HOST: str = '0.0.0.0'
	PORT: int = 8000

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
