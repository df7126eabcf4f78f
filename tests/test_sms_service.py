from types import SimpleNamespace

import pytest
from twilio.base.exceptions import TwilioException

from config import Settings
from infrastructure.sms_gateway import SmsGateway, SmsSendError
from services.sms_service import send_sms


def test_send_sms_logs_sent(state, stub_transport):
    result = send_sms(state, stub_transport, " 9876543210 ", " Your phone is ready ")

    assert result.ok
    assert result.text == "SMS sent"
    assert stub_transport.sent == [("9876543210", "Your phone is ready")]
    (log,) = state.message_logs
    assert (log.to_number, log.message, log.status) == (
        "9876543210",
        "Your phone is ready",
        "sent",
    )
    assert result.log == log
    assert result.log.id is not None


def test_send_sms_failure_is_recorded_not_raised(state, stub_transport):
    stub_transport.error = RuntimeError("no signal")

    result = send_sms(state, stub_transport, "123", "hello")

    assert not result.ok
    assert result.text == "Failed to send: no signal"
    assert [log.status for log in state.message_logs] == ["failed"]
    assert result.log == state.message_logs[0]


def test_send_sms_requires_number_and_text(state, stub_transport):
    with pytest.raises(ValueError):
        send_sms(state, stub_transport, "  ", "hello")
    with pytest.raises(ValueError):
        send_sms(state, stub_transport, "123", "")
    assert state.message_logs == []


def _configured_settings():
    return Settings(
        data_dir="/tmp/unused",
        twilio_account_sid="AC123",
        twilio_auth_token="token",
        twilio_from_number="+15550001111",
    )


def test_gateway_sends_through_client():
    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(sid="SM1")

    client = SimpleNamespace(messages=SimpleNamespace(create=create))
    gateway = SmsGateway(_configured_settings(), client=client)

    assert gateway.send("+911234567890", "hi") == "SM1"
    assert calls == [{"body": "hi", "from_": "+15550001111", "to": "+911234567890"}]


def test_gateway_wraps_provider_errors():
    def create(**kwargs):
        raise TwilioException("invalid number")

    client = SimpleNamespace(messages=SimpleNamespace(create=create))
    gateway = SmsGateway(_configured_settings(), client=client)

    with pytest.raises(SmsSendError, match="invalid number"):
        gateway.send("bad", "hi")


def test_unconfigured_gateway_raises(settings):
    gateway = SmsGateway(settings)

    assert not gateway.is_configured
    with pytest.raises(SmsSendError):
        gateway.send("123", "hi")


def test_unconfigured_gateway_produces_failed_log(state, settings):
    result = send_sms(state, SmsGateway(settings), "123", "hi")

    assert not result.ok
    assert state.message_logs[0].status == "failed"
