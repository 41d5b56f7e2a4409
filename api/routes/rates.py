from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_rate_service
from api.schemas import ExchangeRateResponse, ExchangeRatesResponse
from application.services import RateService
from domain.models.currency import Currency

router = APIRouter(prefix='/api', tags=['rates'])


@router.get(
	'/rates',
	response_model=ExchangeRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get daily exchange rates for the requested currencies',
)
async def get_exchange_rates(
	service: Annotated[RateService, Depends(get_rate_service)],
	currencies: Annotated[list[str] | None, Query(description='Currency codes, repeated or comma separated')] = None,
) -> ExchangeRatesResponse:
	codes = [code.strip() for value in currencies or [] for code in value.split(',') if code.strip()]

	rates = await service.get_exchange_rates([Currency(code) for code in codes])
	return ExchangeRatesResponse(
		target_currency=service.target_currency_code,
		rates=[
			ExchangeRateResponse(
				source_currency=rate.source_currency.code,
				target_currency=rate.target_currency.code,
				value=rate.value,
			)
			for rate in rates
		],
	)
