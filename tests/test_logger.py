"""Tests for devkit/utils/logger.py."""

import logging

from devkit.utils.logger import setup_logger


def test_handler_is_added_once() -> None:
    first = setup_logger("devkit_test_logger")
    second = setup_logger("devkit_test_logger")
    assert first is second
    assert len(first.handlers) == 1


def test_tokenizer_logger_is_quiet() -> None:
    assert setup_logger("php_tokenizer").level == logging.WARNING
