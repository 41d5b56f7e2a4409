"""
Shared test configuration and fixtures.
"""

import json

import pytest

TEST_BASE_URL = 'https://api.cnb.cz'
TEST_ENDPOINT = '/cnbapi/exrates/daily'


class RecordingSleep:
	"""Stands in for asyncio.sleep so retry tests run instantly"""

	def __init__(self):
		self.delays: list[float] = []

	async def __call__(self, delay: float) -> None:
		self.delays.append(delay)


@pytest.fixture
def recording_sleep():
	return RecordingSleep()


@pytest.fixture
def daily_rates_payload():
	"""Trimmed copy of a real /cnbapi/exrates/daily response"""
	return {
		'rates': [
			{
				'validFor': '2025-01-10',
				'order': 7,
				'country': 'USA',
				'currency': 'dolar',
				'amount': 1,
				'currencyCode': 'USD',
				'rate': 20.367,
			},
			{
				'validFor': '2025-01-10',
				'order': 7,
				'country': 'EMU',
				'currency': 'euro',
				'amount': 1,
				'currencyCode': 'EUR',
				'rate': 24.220,
			},
			{
				'validFor': '2025-01-10',
				'order': 7,
				'country': 'Japonsko',
				'currency': 'jen',
				'amount': 100,
				'currencyCode': 'JPY',
				'rate': 13.044,
			},
		]
	}


@pytest.fixture
def daily_rates_body(daily_rates_payload):
	return json.dumps(daily_rates_payload)
