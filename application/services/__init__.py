from .rate_service import RateService, create_rate_service, normalize_rates

__all__ = ['RateService', 'create_rate_service', 'normalize_rates']
