from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _lowercase_keys(data: Any) -> Any:
	if isinstance(data, dict):
		return {str(key).lower(): value for key, value in data.items()}
	return data


class RawRateEntry(BaseModel):
	"""One element of the CNB ``rates`` array; ``rate`` is quoted for ``amount`` units."""

	model_config = ConfigDict(extra='ignore', frozen=True, populate_by_name=True)

	currency_code: str | None = Field(default=None, alias='currencycode')
	amount: int = 1
	rate: Decimal

	@model_validator(mode='before')
	@classmethod
	def case_insensitive_keys(cls, data: Any) -> Any:
		return _lowercase_keys(data)


class DailyRatesPayload(BaseModel):
	model_config = ConfigDict(extra='ignore')

	rates: list[RawRateEntry] | None = None

	@model_validator(mode='before')
	@classmethod
	def case_insensitive_keys(cls, data: Any) -> Any:
		return _lowercase_keys(data)
