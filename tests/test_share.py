"""
Unit tests for the email-relay boundary.
"""

import base64

import pytest

from PX_Libs.RenderLib.share import ShareRequest, is_valid_recipient, share_image


class RecordingRelay:
    def __init__(self, error=None):
        self.requests = []
        self.error = error

    def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error


class TestIsValidRecipient:
    """Tests for recipient validation."""

    @pytest.mark.parametrize("recipient", ["ana@example.com", "  a.b+c@mail.example.org "])
    def test_valid(self, recipient):
        assert is_valid_recipient(recipient)

    @pytest.mark.parametrize("recipient", [None, "", "   ", "no-at-sign", "a@b", "two@@example.com", "a b@c.de"])
    def test_invalid(self, recipient):
        assert not is_valid_recipient(recipient)


class TestShareImage:
    """Tests for share_image."""

    def test_success(self, small_red_image):
        relay = RecordingRelay()

        assert share_image(relay, " friend@example.com ", small_red_image) is True

        request = relay.requests[0]
        assert isinstance(request, ShareRequest)
        assert request.recipient == "friend@example.com"
        assert request.message == "Here is your edited image!"
        assert request.image_data_uri.startswith("data:image/png;base64,")
        assert base64.b64decode(request.image_data_uri.split(",", 1)[1]).startswith(b"\x89PNG")

    def test_custom_message(self, small_red_image):
        relay = RecordingRelay()

        share_image(relay, "friend@example.com", small_red_image, message="Look!")

        assert relay.requests[0].to_dict()["message"] == "Look!"

    @pytest.mark.parametrize("recipient", [None, "", "nobody"])
    def test_invalid_recipient_never_calls_relay(self, small_red_image, recipient):
        relay = RecordingRelay()

        assert share_image(relay, recipient, small_red_image) is False
        assert relay.requests == []

    def test_relay_failure_reported(self, small_red_image, caplog):
        relay = RecordingRelay(error=ConnectionError("relay down"))

        with caplog.at_level("WARNING"):
            assert share_image(relay, "friend@example.com", small_red_image) is False

        assert len(relay.requests) == 1
        assert "relay down" in caplog.text
