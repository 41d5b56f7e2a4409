import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from tenacity import (
	AsyncRetrying,
	RetryCallState,
	retry_if_exception_type,
	retry_if_result,
	stop_after_attempt,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


def exponential_delay(attempt: int) -> float:
	"""2, 4, 8, ... seconds for retry attempts 1, 2, 3, ..."""
	return float(2**attempt)


def _never(result: Any) -> bool:
	return False


@dataclass(frozen=True)
class RetryPolicy:
	"""Bounded retries with a configurable delay, keyed on a result/exception classifier.

	An operation is attempted at most ``retry_count + 1`` times. An attempt is
	retried when it raises one of ``retry_on_exceptions`` or when
	``retry_on_result`` returns True for its result. Once retries run out, a
	raised exception propagates unchanged and an unwanted result is returned
	as-is, so the caller decides what a bad final result means.
	"""

	retry_count: int = 3
	delay: Callable[[int], float] = exponential_delay
	retry_on_result: Callable[[Any], bool] = _never
	retry_on_exceptions: tuple[type[BaseException], ...] = ()
	describe_result: Callable[[Any], str] = str
	sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

	def __post_init__(self) -> None:
		if self.retry_count < 0:
			raise ValueError('retry_count must not be negative')

	async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
		retrying = AsyncRetrying(
			stop=stop_after_attempt(self.retry_count + 1),
			wait=self._wait,
			retry=retry_if_exception_type(self.retry_on_exceptions) | retry_if_result(self.retry_on_result),
			before_sleep=self._log_retry,
			retry_error_callback=self._last_outcome,
			sleep=self.sleep,
		)
		return await retrying(operation)

	def _wait(self, retry_state: RetryCallState) -> float:
		return self.delay(retry_state.attempt_number)

	def _log_retry(self, retry_state: RetryCallState) -> None:
		delay = retry_state.next_action.sleep if retry_state.next_action else self._wait(retry_state)
		logger.warning(
			'Retry %d after %ss due to: %s', retry_state.attempt_number, delay, self._describe(retry_state)
		)

	def _describe(self, retry_state: RetryCallState) -> str:
		outcome = retry_state.outcome
		if outcome is None:
			return 'Unknown'
		if outcome.failed:
			error = outcome.exception()
			return str(error) or error.__class__.__name__
		return self.describe_result(outcome.result())

	@staticmethod
	def _last_outcome(retry_state: RetryCallState) -> Any:
		# re-raises when the final attempt failed with an exception
		return retry_state.outcome.result()
