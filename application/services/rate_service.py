import logging
from collections.abc import Iterable

from config.settings import Settings
from domain.exceptions.currency import ConfigurationError, DecodeError
from domain.models.currency import Currency, ExchangeRate, RateFetchResult
from infrastructure.providers.base import ExchangeRateProvider
from infrastructure.providers.cnb import CNBProvider
from infrastructure.providers.schemas import RawRateEntry

logger = logging.getLogger(__name__)


def normalize_rates(
	entries: Iterable[RawRateEntry], requested_currencies: Iterable[Currency], target_currency_code: str
) -> list[ExchangeRate]:
	"""Turn raw per-batch quotes into per-unit rates for the requested currencies.

	Entries without a code, the target currency itself and anything not
	requested are dropped. Input order is kept and duplicates are not merged.
	"""
	requested_codes = {currency.code.upper() for currency in requested_currencies}
	target_key = target_currency_code.upper()
	target = Currency(target_currency_code)

	rates: list[ExchangeRate] = []
	for entry in entries:
		code = entry.currency_code
		if code is None or not code.strip():
			continue
		key = code.upper()
		if key == target_key or key not in requested_codes:
			continue
		if entry.amount <= 0:
			logger.warning('Skipping %s: amount must be positive, got %d', code, entry.amount)
			continue

		normalized_rate = entry.rate / entry.amount
		logger.debug('Parsed rate: %s/%s = %s', code, target_currency_code, normalized_rate)
		rates.append(ExchangeRate(source_currency=Currency(code), target_currency=target, value=normalized_rate))

	return rates


class RateService:
	def __init__(self, provider: ExchangeRateProvider, target_currency_code: str = 'CZK'):
		self.target_currency_code = self.validate_target_currency_code(target_currency_code)
		self.provider = provider

	@staticmethod
	def validate_target_currency_code(code: str | None) -> str:
		if not code or not code.strip():
			raise ConfigurationError('TargetCurrencyCode is not configured')
		return code

	async def get_exchange_rates(self, currencies: Iterable[Currency] | None) -> list[ExchangeRate]:
		"""Rates for the requested currencies; any failure yields an empty list."""
		result = await self.fetch_rates(currencies)
		if result.was_successful:
			return result.rates

		if isinstance(result.error, DecodeError):
			logger.error('Failed to deserialize JSON response from %s', self.provider.name, exc_info=result.error)
		else:
			logger.error('Failed to fetch exchange rates from %s', self.provider.name, exc_info=result.error)
		return []

	async def fetch_rates(self, currencies: Iterable[Currency] | None) -> RateFetchResult:
		requested = list(currencies or [])
		if not requested:
			logger.warning('No currencies provided')
			return RateFetchResult()

		logger.info('Fetching exchange rates from %s for %d currencies', self.provider.name, len(requested))
		try:
			entries = await self.provider.fetch_daily_rates()
			rates = normalize_rates(entries, requested, self.target_currency_code)
		except Exception as e:
			return RateFetchResult.failure(e)

		logger.info('Successfully retrieved %d exchange rates from %s', len(rates), self.provider.name)
		return RateFetchResult(rates=rates)

	async def close(self) -> None:
		await self.provider.close()


def create_rate_service(settings: Settings) -> RateService:
	"""Wire a RateService over the CNB provider; settings are checked before any client is opened."""
	target_currency_code = RateService.validate_target_currency_code(settings.CNB_TARGET_CURRENCY_CODE)
	provider = CNBProvider.from_settings(settings)
	return RateService(provider=provider, target_currency_code=target_currency_code)
