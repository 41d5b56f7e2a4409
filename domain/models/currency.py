from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True, eq=False)
class Currency:
	"""Currency identified by its code; codes compare case-insensitively."""

	code: str

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Currency):
			return NotImplemented
		return self.code.upper() == other.code.upper()

	def __hash__(self) -> int:
		return hash(self.code.upper())

	def __str__(self) -> str:
		return self.code


@dataclass(frozen=True)
class ExchangeRate:
	source_currency: Currency
	target_currency: Currency
	value: Decimal  # per single unit of source_currency

	def __str__(self) -> str:
		return f'{self.source_currency}/{self.target_currency}={self.value}'


@dataclass(frozen=True)
class RateFetchResult:
	"""Outcome of one fetch before failures are collapsed to an empty list"""

	rates: list[ExchangeRate] = field(default_factory=list)
	was_successful: bool = True
	error: Exception | None = None

	@property
	def error_message(self) -> str | None:
		return str(self.error) if self.error is not None else None

	@classmethod
	def failure(cls, error: Exception) -> 'RateFetchResult':
		return cls(rates=[], was_successful=False, error=error)
