from .responses import ExchangeRateResponse, ExchangeRatesResponse

__all__ = [
	'ExchangeRateResponse',
	'ExchangeRatesResponse',
]
