"""Tests for forecastweather._logging: setup and call-logging decorator."""

from __future__ import annotations

import logging

import pytest

from forecastweather._logging import LOGGER_NAME, configure_logging, log_api_call


class _FakeClient:
    """Minimal class to test the logging decorator."""

    @log_api_call
    def forecast(self, city: str, days: int = 3) -> dict:
        return {"city": city, "days": days}

    @log_api_call
    def failing(self, city: str) -> None:
        raise ValueError("test error")

    @log_api_call
    async def async_forecast(self, city: str) -> str:
        return city

    @log_api_call
    async def async_failing(self, city: str) -> None:
        raise RuntimeError("async error")


@pytest.fixture
def fake_client():
    return _FakeClient()


class TestLogApiCall:
    def test_returns_result(self, fake_client):
        assert fake_client.forecast("Paris", days=2) == {"city": "Paris", "days": 2}

    def test_logs_call_and_ok(self, fake_client, caplog):
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            fake_client.forecast("Paris", days=2)
        assert "CALL: _FakeClient.forecast('Paris', days=2)" in caplog.text
        assert "OK: _FakeClient.forecast('Paris', days=2)" in caplog.text

    def test_logs_failure(self, fake_client, caplog):
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            with pytest.raises(ValueError, match="test error"):
                fake_client.failing("Paris")
        assert "FAIL: _FakeClient.failing('Paris') -> ValueError: test error" in caplog.text
        assert caplog.records[-1].levelno == logging.ERROR

    def test_preserves_function_name(self, fake_client):
        assert fake_client.forecast.__name__ == "forecast"
        assert fake_client.async_forecast.__name__ == "async_forecast"

    @pytest.mark.asyncio
    async def test_async_returns_result(self, fake_client, caplog):
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            assert await fake_client.async_forecast("Oslo") == "Oslo"
        assert "OK: _FakeClient.async_forecast('Oslo')" in caplog.text

    @pytest.mark.asyncio
    async def test_async_logs_failure(self, fake_client, caplog):
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            with pytest.raises(RuntimeError, match="async error"):
                await fake_client.async_failing("Oslo")
        assert "FAIL: _FakeClient.async_failing('Oslo') -> RuntimeError" in caplog.text


class TestConfigureLogging:
    def test_default_level(self):
        logger = configure_logging()
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING

    def test_verbose_level(self):
        assert configure_logging(verbose=True).level == logging.DEBUG

    def test_single_handler(self):
        configure_logging()
        logger = configure_logging(verbose=True)
        assert len(logger.handlers) == 1

    def test_writes_to_stderr(self, capsys):
        logger = configure_logging(verbose=True)
        logger.debug("hello from the client")
        err = capsys.readouterr().err
        assert "| DEBUG | hello from the client" in err
