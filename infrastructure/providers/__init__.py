from .base import ExchangeRateProvider
from .cnb import CNBProvider, decode_daily_rates
from .schemas import DailyRatesPayload, RawRateEntry

__all__ = ['CNBProvider', 'DailyRatesPayload', 'ExchangeRateProvider', 'RawRateEntry', 'decode_daily_rates']
