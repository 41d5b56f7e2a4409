class CurrencyException(Exception):
	pass


class ConfigurationError(CurrencyException):
	pass


class ProviderError(CurrencyException):
	pass


class TransportError(ProviderError):
	def __init__(self, message: str, *, status_code: int | None = None) -> None:
		super().__init__(message)
		self.status_code = status_code


class DecodeError(ProviderError):
	pass
