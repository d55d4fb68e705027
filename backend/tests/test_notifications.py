from __future__ import annotations

import pytest

from community.core.config import Settings
from community.services import notifications
from community.services.notifications import ConsoleSmsChannel, Notifier, TwilioSmsChannel, get_sms_channel
from tests.testkit import RecordingEmailChannel


class FakeTwilioClient:
    instances: list["FakeTwilioClient"] = []

    def __init__(self, account_sid, auth_token, http_client=None):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.http_client = http_client
        self.created: list[dict] = []
        self.messages = self
        FakeTwilioClient.instances.append(self)

    def create(self, **kwargs):
        self.created.append(kwargs)
        return kwargs


@pytest.fixture
def twilio_cfg(cfg) -> Settings:
    return cfg.model_copy(
        update={
            "SMS_PROVIDER": "twilio",
            "TWILIO_ACCOUNT_SID": "AC123",
            "TWILIO_AUTH_TOKEN": "secret",
            "TWILIO_FROM_NUMBER": "+15550001111",
        }
    )


@pytest.fixture
def fake_twilio(monkeypatch):
    FakeTwilioClient.instances = []
    monkeypatch.setattr(notifications, "TwilioClient", FakeTwilioClient)
    return FakeTwilioClient


def test_sms_channel_selection(cfg, twilio_cfg, fake_twilio):
    assert isinstance(get_sms_channel(cfg), ConsoleSmsChannel)
    channel = get_sms_channel(twilio_cfg)
    assert isinstance(channel, TwilioSmsChannel)
    assert fake_twilio.instances[0].account_sid == "AC123"


def test_twilio_requires_credentials(cfg):
    with pytest.raises(ValueError):
        TwilioSmsChannel(cfg.model_copy(update={"SMS_PROVIDER": "twilio"}))


def test_otp_sms_goes_through_twilio_messages(twilio_cfg, fake_twilio):
    notifier = Notifier(twilio_cfg, RecordingEmailChannel(), get_sms_channel(twilio_cfg))

    assert notifier.send_otp("phone", "9876543210", "482913") is True

    [sent] = fake_twilio.instances[0].created
    assert sent["to"] == "+919876543210"
    assert sent["from_"] == "+15550001111"
    assert "482913" in sent["body"]
