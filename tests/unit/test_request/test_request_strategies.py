"""Unit tests for the production request strategies."""

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest

from logdna_api.request import (
    HttpxExecutor,
    HttpxRequestBuilder,
    JsonMarshaller,
    StreamBodyReader,
)
from logdna_api.request import strategies
from logdna_api.request.strategies import get_shared_client
from logdna_api.views import ChannelRequest, ViewRequest


class TestHttpxRequestBuilder:
    """Tests for HttpxRequestBuilder."""

    def test_builds_request_with_payload(self) -> None:
        """Should carry method, URL and payload."""
        request = HttpxRequestBuilder().build_request(
            "POST", "http://h/someapi", b'{"name":"x"}'
        )

        assert request.method == "POST"
        assert str(request.url) == "http://h/someapi"
        assert request.content == b'{"name":"x"}'


class TestHttpxExecutor:
    """Tests for HttpxExecutor."""

    def test_uses_injected_client_with_streaming(self) -> None:
        """Should send through the given client without reading the body."""
        client = MagicMock()
        request = httpx.Request("GET", "http://h/x")
        client.send.return_value = httpx.Response(200, request=request)

        response = HttpxExecutor(client=client).send(request)

        client.send.assert_called_once_with(request, stream=True)
        assert response.status_code == 200

    def test_applies_timeout_to_request(self) -> None:
        """Should attach the configured timeout to the request."""
        client = MagicMock()
        request = httpx.Request("GET", "http://h/x")

        HttpxExecutor(client=client, timeout=7.0).send(request)

        assert request.extensions["timeout"] == httpx.Timeout(7.0).as_dict()

    def test_keeps_request_timeout(self) -> None:
        """Should not override a timeout already set on the request."""
        client = MagicMock()
        own_timeout = httpx.Timeout(1.0).as_dict()
        request = httpx.Request(
            "GET", "http://h/x", extensions={"timeout": own_timeout}
        )

        HttpxExecutor(client=client, timeout=7.0).send(request)

        assert request.extensions["timeout"] == own_timeout

    @patch("logdna_api.request.strategies.get_shared_client")
    def test_defaults_to_shared_client(self, mock_shared: MagicMock) -> None:
        """Should use the shared pooled client when none is injected."""
        request = httpx.Request("GET", "http://h/x")

        HttpxExecutor().send(request)

        mock_shared.return_value.send.assert_called_once_with(request, stream=True)

    @patch("logdna_api.request.strategies.httpx.Client")
    def test_shared_client_is_created_once(
        self, mock_client_cls: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should hand out the same pooled client every time."""
        monkeypatch.setattr(strategies, "_shared_client", None)

        first = get_shared_client()

        assert get_shared_client() is first
        mock_client_cls.assert_called_once_with()

    def test_body_is_not_read_by_send(self) -> None:
        """Should leave the body for the reader so read failures stay separate."""

        def broken_body():
            yield b"partial"
            raise httpx.ReadError("connection reset")

        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, content=broken_body())
        )
        request = httpx.Request("GET", "http://h/x")

        with httpx.Client(transport=transport) as client:
            response = HttpxExecutor(client=client).send(request)

            assert response.status_code == 200
            assert not response.is_stream_consumed
            with pytest.raises(httpx.ReadError, match="connection reset"):
                StreamBodyReader().read_body(response.iter_bytes())
            response.close()


class TestStreamBodyReader:
    """Tests for StreamBodyReader."""

    def test_drains_all_chunks(self) -> None:
        """Should concatenate every chunk."""
        assert StreamBodyReader().read_body([b"ab", b"", b"cd"]) == b"abcd"

    def test_empty_stream(self) -> None:
        """Should return empty bytes for an empty stream."""
        assert StreamBodyReader().read_body(iter([])) == b""

    def test_propagates_stream_errors(self) -> None:
        """Should let stream failures propagate."""

        def broken():
            yield b"partial"
            raise httpx.ReadError("connection reset")

        with pytest.raises(httpx.ReadError, match="connection reset"):
            StreamBodyReader().read_body(broken())


class TestJsonMarshaller:
    """Tests for JsonMarshaller."""

    def test_model_uses_wire_keys_and_omits_unset(self) -> None:
        """Should dump by alias and drop None fields."""
        body = ViewRequest(
            name="Errors",
            channels=[ChannelRequest(trigger_interval="15m", trigger_limit=5)],
        )

        data = JsonMarshaller().marshal(body)

        assert json.loads(data) == {
            "name": "Errors",
            "channels": [{"triggerinterval": "15m", "triggerlimit": 5}],
        }

    def test_plain_values_are_compact(self) -> None:
        """Should encode mappings without whitespace."""
        assert JsonMarshaller().marshal({"a": [1, 2]}) == b'{"a":[1,2]}'

    def test_non_ascii_kept_as_utf8(self) -> None:
        """Should emit UTF-8 instead of escape sequences."""
        assert JsonMarshaller().marshal({"name": "café"}) == '{"name":"café"}'.encode()

    def test_unserializable_value_raises(self) -> None:
        """Should raise TypeError for values JSON cannot encode."""
        with pytest.raises(TypeError):
            JsonMarshaller().marshal({"bad": object()})
