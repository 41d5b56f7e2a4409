import argparse
import asyncio
import sys

from pydantic import ValidationError

from application.services import create_rate_service
from config.logging_config import configure_logging
from config.settings import Settings, get_settings
from domain.exceptions.currency import ConfigurationError
from domain.models.currency import Currency, ExchangeRate


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description='Print today\'s CNB exchange rates for the given currencies.')
	parser.add_argument(
		'currencies',
		nargs='*',
		metavar='CODE',
		help='Currency codes to look up (default: DEFAULT_CURRENCIES from settings).',
	)
	return parser.parse_args(argv)


async def fetch_rates(codes: list[str], settings: Settings) -> list[ExchangeRate]:
	service = create_rate_service(settings)
	try:
		return await service.get_exchange_rates([Currency(code) for code in codes])
	finally:
		await service.close()


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
	args = parse_args(argv)
	try:
		settings = settings or get_settings()
	except ValidationError as e:
		print(f"Could not retrieve exchange rates: '{e}'.")
		return 1
	configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

	codes = args.currencies or settings.DEFAULT_CURRENCIES
	try:
		rates = asyncio.run(fetch_rates(codes, settings))
	except ConfigurationError as e:
		print(f"Could not retrieve exchange rates: '{e}'.")
		return 1

	print(f'Successfully retrieved {len(rates)} exchange rates:')
	for rate in rates:
		print(rate)
	return 0


if __name__ == '__main__':
	sys.exit(main())
