import logging
import sys
from unittest.mock import call, patch

import pytest
from consfold.config import Settings
from consfold.core import EMPTY, NotASequence, from_iterable, seq
from consfold.functional import append, filter, list_count, map
from consfold.logger.logger import logger, setup_logger


def test_default_logger():
    assert logger.name == "consfold"
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_setup_logger_is_idempotent():
    first = setup_logger("consfold.test_idempotent", level="WARNING")
    second = setup_logger("consfold.test_idempotent", level="DEBUG")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.WARNING


def test_setup_logger_writes_to_stdout():
    custom = setup_logger("consfold.test_stdout", format_string="%(message)s")
    (handler,) = custom.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stdout
    assert handler.formatter._fmt == "%(message)s"


def test_operations_log_once_per_call():
    numbers = from_iterable(range(1000))
    with patch("consfold.functional.operations.logger") as mock_logger:
        map(numbers, lambda x: x + 1)
        filter(numbers, lambda x: x % 2 == 0)
    assert mock_logger.debug.call_args_list == [call("map"), call("filter")]


def test_guard_logs_before_raising():
    with patch("consfold.core.sequence.logger") as mock_logger:
        with pytest.raises(NotASequence):
            list_count([1, 2, 3])
    mock_logger.debug.assert_called_once()
    assert "list" in mock_logger.debug.call_args.args[0]


def test_valid_input_is_not_logged_by_guard():
    with patch("consfold.core.sequence.logger") as mock_logger:
        list_count(seq(1, 2, 3))
    mock_logger.debug.assert_not_called()


def test_permissive_append_warns_on_mixed_arguments():
    with patch("consfold.config.settings", Settings(STRICT_APPEND=False)), patch(
        "consfold.functional.operations.logger"
    ) as mock_logger:
        with pytest.raises(NotASequence):
            append(seq(1), [2])
        assert append(EMPTY, [2]) == [2]
    assert mock_logger.warning.call_count == 2


def test_strict_append_does_not_warn():
    with patch("consfold.functional.operations.logger") as mock_logger:
        assert append(seq(1), seq(2)) == seq(1, 2)
    mock_logger.warning.assert_not_called()


def test_setup_logger_defaults_to_configured_level():
    configured = Settings.load(environ={"LOG_LEVEL": "DEBUG"})
    with patch("consfold.config.settings", configured):
        custom = setup_logger("consfold.test_configured_level")
    assert custom.level == logging.DEBUG
