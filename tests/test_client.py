import pytest
import requests
from urllib3.exceptions import InsecureRequestWarning

from baas_client import BaaSClient, LogicalRequest, generate_auth_code
from baas_client.endpoints import FORM_CONTENT_TYPE
from baas_client.exceptions import HTTPResponseError, TransportError
from baas_client.http import TransportOptions, TransportResponse, encode_query, js_text

BASE_URL = "http://baas.test/baasapi"


def build_client(**kwargs):
    kwargs.setdefault("base_url", BASE_URL)
    return BaaSClient("ID1", "KEY1", **kwargs)


def parse_auth_code(value):
    return dict(part.split("=", 1) for part in value.split("&"))


class RecordingTransport:
    def __init__(self, status_code=200, content=b"{}"):
        self.calls = []
        self.status_code = status_code
        self.content = content

    def send(self, uri, *, method, headers, body, options):
        self.calls.append(
            {"uri": uri, "method": method, "headers": headers, "body": body, "options": options}
        )
        return TransportResponse(
            status_code=self.status_code,
            status_message="OK",
            ok=200 <= self.status_code < 300,
            content=self.content,
            headers={},
        )

    def close(self):  # pragma: no cover - helper
        pass


def test_auth_code_header_is_recomputable_by_server(requests_mock):
    client = build_client()
    matcher = requests_mock.get(f"{BASE_URL}/v1.0/devices", json={"total": 0})

    client.devices.list({"sessionToken": "tok", "deviceName": "a b", "pageNum": 0})

    sent = matcher.last_request.headers["authCode"]
    fields = parse_auth_code(sent)
    assert fields["accessId"] == "ID1"
    expected = generate_auth_code(
        "GET",
        "KEY1",
        "ID1",
        {"deviceName": "a b", "pageNum": 0},
        nonce=fields["nonce"],
        timestamp=int(fields["timestamp"]),
    )
    assert sent == expected


def test_query_string_and_session_header(requests_mock):
    client = build_client()
    matcher = requests_mock.get(f"{BASE_URL}/v1.0/devices", json=[])

    client.devices.list({"sessionToken": "tok", "deviceName": "a b", "pageNum": 0})

    request = matcher.last_request
    assert request.url == f"{BASE_URL}/v1.0/devices?deviceName=a%20b&pageNum=0"
    assert request.headers["session-token"] == "tok"
    assert request.headers["Accept"] == "*/*"


def test_get_never_sends_a_body(requests_mock):
    client = build_client()
    matcher = requests_mock.get(f"{BASE_URL}/v1.0/things", json={})

    client.request(LogicalRequest("get", "/v1.0/things", body={"ignored": True}))

    assert matcher.last_request.body is None


def test_head_never_sends_a_body():
    transport = RecordingTransport(content=b"")
    client = build_client(transport=transport)

    client.request(LogicalRequest("HEAD", "/v1.0/things", body={"ignored": True}))

    assert transport.calls[0]["body"] is None
    assert transport.calls[0]["method"] == "HEAD"


def test_post_sends_compact_json_body(requests_mock):
    client = build_client()
    matcher = requests_mock.post(f"{BASE_URL}/v1.0/devices", json={"id": 1})

    response = client.devices.create({"sessionToken": "tok", "addDevice": {"name": "d1"}})

    assert matcher.last_request.text == '{"name":"d1"}'
    assert matcher.last_request.headers["Content-Type"] == "application/json"
    assert response.body == {"id": 1}
    assert response.status_code == 200


def test_put_without_body_param_sends_empty_object(requests_mock):
    client = build_client()
    matcher = requests_mock.put(f"{BASE_URL}/v1.0/users/7/enable", json={})

    client.users.enable({"sessionToken": "tok", "userId": 7})

    assert matcher.last_request.text == "{}"


def test_form_fields_take_precedence_over_body(requests_mock):
    client = build_client()
    matcher = requests_mock.post(f"{BASE_URL}/v1.0/form", json={})

    client.request(
        LogicalRequest(
            "POST",
            "/v1.0/form",
            headers={"Content-Type": FORM_CONTENT_TYPE},
            body={"a": 1, "b": "x"},
            form={"a": 2},
        )
    )

    assert matcher.last_request.text == "a=2&b=x"
    assert matcher.last_request.headers["Content-Type"] == FORM_CONTENT_TYPE


def test_non_json_response_falls_back_to_text(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1.0/users/1", text="not-json")

    response = client.users.get({"sessionToken": "tok", "userId": 1})

    assert response.body == "not-json"
    assert response.ok is True


def test_http_error_carries_normalized_response(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/v1.0/users/1",
        status_code=403,
        reason="Forbidden",
        json={"code": "AUTH_FAILED"},
    )

    with pytest.raises(HTTPResponseError) as excinfo:
        client.users.get({"sessionToken": "tok", "userId": 1})

    response = excinfo.value.response
    assert excinfo.value.status_code == 403
    assert response.status_code == 403
    assert response.status_message == "Forbidden"
    assert response.body == {"code": "AUTH_FAILED"}
    assert response.ok is False


def test_transport_failure_includes_root_cause(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/v1.0/users/1",
        exc=requests.exceptions.ConnectionError("Connection refused"),
    )

    with pytest.raises(TransportError) as excinfo:
        client.users.get({"sessionToken": "tok", "userId": 1})

    assert "Connection refused" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)


def test_secure_base_url_passes_tls_options():
    transport = RecordingTransport()
    client = build_client(
        base_url="https://baas.test/baasapi",
        ca_cert="/etc/baas/ca.pem",
        transport=transport,
    )

    client.call("findRoleNameListUsingGET", {"sessionToken": "tok"})

    assert transport.calls[0]["options"] == TransportOptions(
        ca_cert="/etc/baas/ca.pem", reject_unauthorized=True
    )
    assert transport.calls[0]["uri"] == "https://baas.test/baasapi/v1.0/roles/offSpringRole"


def test_plain_base_url_omits_tls_options():
    transport = RecordingTransport()
    client = build_client(ca_cert="/etc/baas/ca.pem", transport=transport)

    client.call("findRoleNameListUsingGET", {"sessionToken": "tok"})

    assert transport.calls[0]["options"] is None


def test_requests_transport_maps_verify_flag():
    from baas_client.http import RequestsTransport

    captured = {}

    class FakeResponse:
        status_code = 200
        reason = "OK"
        content = b'{"ok": true}'
        headers = {}
        encoding = "utf-8"

    class FakeSession:
        def request(self, **kwargs):
            captured.update(kwargs)
            return FakeResponse()

        def close(self):  # pragma: no cover - helper
            pass

    transport = RequestsTransport(FakeSession(), timeout=5.0)
    raw = transport.send(
        "https://baas.test/x",
        method="GET",
        headers={"Accept": "*/*"},
        body=None,
        options=TransportOptions(reject_unauthorized=False),
    )

    assert captured["verify"] is False
    assert captured["timeout"] == 5.0
    assert raw.ok is True
    assert raw.text == '{"ok": true}'


def test_debug_trace_never_contains_secrets(caplog, requests_mock):
    client = build_client(debug=True)
    requests_mock.get(f"{BASE_URL}/v1.0/devices", json=[])

    with caplog.at_level("DEBUG", logger="baas_client"):
        client.devices.list({"sessionToken": "session-secret", "pageNum": 1})

    assert "authCode: accessId=ID1" in caplog.text
    assert "signature=***" in caplog.text
    assert "KEY1" not in caplog.text
    assert "session-secret" not in caplog.text


def test_request_is_logged_at_info(caplog, requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1.0/roles/offSpringRole", json=[])

    with caplog.at_level("INFO", logger="baas_client.client"):
        client.roles.offspring({"sessionToken": "tok"})

    assert f"BaaS request GET {BASE_URL}/v1.0/roles/offSpringRole" in caplog.text


def test_disables_insecure_warning_when_verify_disabled(monkeypatch):
    captured: list[object] = []

    def fake_disable(warning):  # pragma: no cover - helper
        captured.append(warning)

    monkeypatch.setattr("baas_client.client.urllib3.disable_warnings", fake_disable)

    build_client(base_url="https://baas.test/baasapi", reject_unauthorized=False)

    assert captured and captured[0] is InsecureRequestWarning


def test_text_without_charset_is_decoded_as_utf8(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/v1.0/users/1",
        content="设备不存在".encode("utf-8"),
        headers={"Content-Type": "text/plain"},
    )

    response = client.users.get({"sessionToken": "tok", "userId": 1})

    assert response.body == "设备不存在"


def test_json_in_html_response_is_decoded_as_utf8(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/v1.0/users/1",
        content='{"msg":"成功"}'.encode("utf-8"),
        headers={"Content-Type": "text/html"},
    )

    response = client.users.get({"sessionToken": "tok", "userId": 1})

    assert response.body == {"msg": "成功"}


def test_declared_charset_is_honoured(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/v1.0/users/1",
        content="成功".encode("gbk"),
        headers={"Content-Type": "text/plain; charset=GBK"},
    )

    response = client.users.get({"sessionToken": "tok", "userId": 1})

    assert response.body == "成功"
    assert response.raw_response.encoding == "GBK"


def test_deeply_nested_body_falls_back_to_text(requests_mock):
    client = build_client()
    nested = "[" * 100000 + "]" * 100000
    requests_mock.get(f"{BASE_URL}/v1.0/users/1", text=nested)

    response = client.users.get({"sessionToken": "tok", "userId": 1})

    assert response.body == nested


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity", '{"a": NaN}'])
def test_non_json_constants_fall_back_to_text(requests_mock, constant):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1.0/users/1", text=constant)

    response = client.users.get({"sessionToken": "tok", "userId": 1})

    assert response.body == constant


def test_non_finite_numbers_use_javascript_text():
    assert js_text(float("nan")) == "NaN"
    assert js_text(float("inf")) == "Infinity"
    assert js_text(float("-inf")) == "-Infinity"
    assert js_text(2.0) == "2"
    assert encode_query({"a": float("nan"), "b": float("inf"), "c": 1.5}) == "a=&b=&c=1.5"
