import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from decimal import Decimal

import httpx
from pydantic import ValidationError

from config.settings import Settings
from domain.exceptions.currency import ConfigurationError, DecodeError, TransportError
from infrastructure.providers.schemas import DailyRatesPayload, RawRateEntry
from infrastructure.retry import RetryPolicy

logger = logging.getLogger(__name__)


def decode_daily_rates(body: str) -> list[RawRateEntry]:
	"""Parse a CNB daily rates body into raw entries.

	A payload without a ``rates`` array decodes to an empty list (with a
	warning); a body that is not JSON, or whose entries do not have the
	expected shape, raises DecodeError.
	"""
	try:
		data = json.loads(body, parse_float=Decimal)
	except ValueError as e:
		raise DecodeError(f'CNB response is not valid JSON: {e}') from e

	if data is None:
		logger.warning('Invalid API response: rates array is null or missing')
		return []

	try:
		payload = DailyRatesPayload.model_validate(data)
	except ValidationError as e:
		raise DecodeError(f'CNB response has an unexpected shape: {e.error_count()} validation error(s)') from e

	if payload.rates is None:
		logger.warning('Invalid API response: rates array is null or missing')
		return []

	logger.debug('Parsing %d rates from API response', len(payload.rates))
	return payload.rates


class CNBProvider:
	"""Czech National Bank daily exchange rates"""

	def __init__(
		self,
		api_base_url: str | None,
		daily_rates_endpoint: str | None,
		timeout: float = 30,
		retry_count: int = 3,
		client: httpx.AsyncClient | None = None,
		sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
	):
		if not api_base_url:
			raise ConfigurationError('ApiBaseUrl is not configured')
		if not daily_rates_endpoint:
			raise ConfigurationError('DailyRatesEndpoint is not configured')
		if timeout <= 0:
			raise ConfigurationError(f'TimeoutSeconds must be positive, got {timeout}')
		if retry_count < 0:
			raise ConfigurationError(f'RetryCount must not be negative, got {retry_count}')

		self.api_base_url = api_base_url
		self.daily_rates_endpoint = daily_rates_endpoint
		self.timeout = timeout

		if client is None:
			self._client = httpx.AsyncClient(base_url=api_base_url, timeout=httpx.Timeout(timeout))
		else:
			self._client = client
			self._client.base_url = api_base_url
			self._client.timeout = httpx.Timeout(timeout)

		self._retry_policy = RetryPolicy(
			retry_count=retry_count,
			retry_on_result=lambda response: not response.is_success,
			retry_on_exceptions=(httpx.RequestError, TimeoutError),
			describe_result=lambda response: f'HTTP {response.status_code}',
			sleep=sleep,
		)

	@classmethod
	def from_settings(cls, settings: Settings, client: httpx.AsyncClient | None = None) -> 'CNBProvider':
		return cls(
			api_base_url=settings.CNB_API_BASE_URL,
			daily_rates_endpoint=settings.CNB_DAILY_RATES_ENDPOINT,
			timeout=settings.CNB_TIMEOUT_SECONDS,
			retry_count=settings.CNB_RETRY_COUNT,
			client=client,
		)

	@property
	def name(self) -> str:
		return 'CNB API'

	async def fetch_daily_rates(self) -> list[RawRateEntry]:
		body = await self.fetch_daily_rates_body()
		return decode_daily_rates(body)

	async def fetch_daily_rates_body(self) -> str:
		try:
			response = await self._retry_policy.execute(self._get_daily_rates)
		except httpx.RequestError as e:
			raise TransportError(f'CNB request failed: {e.__class__.__name__}: {e}') from e
		except TimeoutError as e:
			raise TransportError(f'CNB request timed out after {self.timeout}s') from e

		if not response.is_success:
			raise TransportError(
				f'CNB HTTP error {response.status_code}: {response.text[:200]}',
				status_code=response.status_code,
			)

		content = response.text
		logger.debug('Received response from CNB API: %d characters', len(content))
		return content

	async def _get_daily_rates(self) -> httpx.Response:
		logger.debug('Calling CNB API: %s', self.daily_rates_endpoint)
		return await asyncio.wait_for(self._client.get(self.daily_rates_endpoint), timeout=self.timeout)

	async def close(self) -> None:
		await self._client.aclose()
