from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ExchangeRateResponse(BaseModel):
	source_currency: str = Field(..., description='Source currency code')
	target_currency: str = Field(..., description='Target currency code')
	value: Decimal = Field(..., description='Value of one unit of source currency in target currency')


class ExchangeRatesResponse(BaseModel):
	target_currency: str = Field(..., description='Currency all rates are expressed against')
	rates: list[ExchangeRateResponse] = Field(description='Rates for the requested currencies')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'target_currency': 'CZK',
				'rates': [
					{'source_currency': 'USD', 'target_currency': 'CZK', 'value': '20.367'},
					{'source_currency': 'JPY', 'target_currency': 'CZK', 'value': '0.13044'},
				],
			}
		}
	)
