import inspect

import pytest

from baas_client import BaaSClient
from baas_client import resources
from baas_client.exceptions import MissingParameterError
from baas_client.operations import OPERATIONS
from baas_client.resources.base import ResourceBase
from baas_client.resources.session import session_token

BASE_URL = "http://baas.test/baasapi"


def build_client():
    return BaaSClient("ID1", "KEY1", base_url=BASE_URL)


class RecordingClient:
    def __init__(self):
        self.calls = []

    def call(self, operation_id, parameters=None):
        self.calls.append((operation_id, parameters))
        return operation_id


def _resource_classes():
    return [
        obj
        for obj in vars(resources).values()
        if inspect.isclass(obj) and issubclass(obj, ResourceBase) and obj is not ResourceBase
    ]


def test_resource_methods_cover_every_catalogued_operation():
    recorder = RecordingClient()
    for cls in _resource_classes():
        resource = cls(recorder)
        for name, _ in inspect.getmembers(cls, inspect.isfunction):
            if name.startswith("_"):
                continue
            getattr(resource, name)({"sessionToken": "tok"})

    called = [operation_id for operation_id, _ in recorder.calls]
    assert set(called) == set(OPERATIONS)
    assert len(called) == len(set(called))


def test_devices_get(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1.0/devices/info/d-1", json={"deviceId": "d-1"})

    response = client.devices.get({"sessionToken": "tok", "deviceId": "d-1"})

    assert response.body["deviceId"] == "d-1"


def test_archives_lookup_sends_query(requests_mock):
    client = build_client()
    matcher = requests_mock.get(f"{BASE_URL}/v1.0/devices/archives", json={})

    client.archives.get({"sessionToken": "tok", "archiveName": "temp"})

    assert matcher.last_request.url.endswith("/v1.0/devices/archives?archiveName=temp")


def test_commands_status_substitutes_uuid(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/v1.0/devices/commands/send/abc-123", json={"status": "DONE"}
    )

    response = client.commands.status({"sessionToken": "tok", "cmdUuid": "abc-123"})

    assert response.body == {"status": "DONE"}


def test_external_data_delete_requires_record_id(requests_mock):
    client = build_client()

    with pytest.raises(MissingParameterError) as excinfo:
        client.external_data.delete({"sessionToken": "tok", "externalDataName": "t"})

    assert excinfo.value.parameter == "recordId"
    assert excinfo.value.operation == "deleteExternalDataUsingDELETE"
    assert not requests_mock.called


def test_sql_template_by_id(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1.0/sqlTemplates/9", json={"id": 9})

    response = client.sql_templates.get({"sessionToken": "tok", "sqlTemplateId": 9})

    assert response.body == {"id": 9}


def test_register_signs_app_token_query(requests_mock):
    client = build_client()
    matcher = requests_mock.post(f"{BASE_URL}/v1.0/register", json={"ok": True})

    client.session.register({"appToken": "app", "registerUserRequest": {"loginName": "bob"}})

    request = matcher.last_request
    assert request.url.endswith("/v1.0/register?appToken=app")
    assert request.text == '{"loginName":"bob"}'
    assert "session-token" not in request.headers


def test_login_returns_session_token(requests_mock):
    client = build_client()
    matcher = requests_mock.post(
        f"{BASE_URL}/v1.0/login",
        json={"code": 200},
        headers={"session-token": "tok-1"},
    )

    response = client.session.login({"appToken": "app", "loginName": "alice", "password": "pw"})

    assert session_token(response) == "tok-1"
    assert matcher.last_request.text == "appToken=app&loginName=alice&password=pw"
