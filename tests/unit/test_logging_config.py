import json
import logging
import sys

import pytest

from config.logging_config import CONSOLE_FORMAT, JSONFormatter, configure_logging
from domain.exceptions.currency import DecodeError


@pytest.fixture
def restore_root_logger():
	root_logger = logging.getLogger()
	handlers, level = list(root_logger.handlers), root_logger.level
	yield root_logger
	root_logger.handlers[:] = handlers
	root_logger.setLevel(level)


def make_record(exc_info=None):
	return logging.LogRecord(
		'infrastructure.retry', logging.WARNING, __file__, 42, 'Retry %d after %ss', (1, 2.0), exc_info
	)


def test_json_formatter_outputs_structured_entry():
	entry = json.loads(JSONFormatter().format(make_record()))

	assert entry['level'] == 'WARNING'
	assert entry['logger'] == 'infrastructure.retry'
	assert entry['message'] == 'Retry 1 after 2.0s'
	assert entry['line'] == 42
	assert 'exception' not in entry


def test_json_formatter_includes_exception():
	try:
		raise DecodeError('CNB response is not valid JSON')
	except DecodeError:
		record = make_record(exc_info=sys.exc_info())

	entry = json.loads(JSONFormatter().format(record))

	assert entry['exception']['type'] == 'DecodeError'
	assert entry['exception']['message'] == 'CNB response is not valid JSON'


def test_json_formatter_keeps_non_ascii_text():
	record = logging.LogRecord('infrastructure.providers.cnb', logging.INFO, __file__, 1, 'Kurz %s', ('koruna česká',), None)

	line = JSONFormatter().format(record)

	assert 'koruna česká' in line
	assert json.loads(line)['message'] == 'Kurz koruna česká'


def test_configure_logging_console(restore_root_logger):
	configure_logging('debug')

	assert restore_root_logger.level == logging.DEBUG
	assert len(restore_root_logger.handlers) == 1
	assert restore_root_logger.handlers[0].formatter._fmt == CONSOLE_FORMAT
	assert logging.getLogger('httpx').level == logging.WARNING


def test_configure_logging_json(restore_root_logger):
	configure_logging('INFO', json_output=True)

	assert restore_root_logger.level == logging.INFO
	assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
