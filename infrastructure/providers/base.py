from typing import Protocol

from infrastructure.providers.schemas import RawRateEntry


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_daily_rates(self) -> list[RawRateEntry]: ...

	async def close(self) -> None: ...
