from typer.testing import CliRunner

from baas_client.cli import app

runner = CliRunner()

ARGS = [
    "call",
    "findRoleNameListUsingGET",
    "--base-url",
    "https://baas.test/baasapi",
    "--access-id",
    "ID1",
    "--access-key",
    "KEY1",
    "--session-token",
    "tok",
]


class _Response:
    status_code = 200
    status_message = "OK"
    body: list[str] = []


def _dummy_client(captured):
    class DummyClient:
        def __init__(self, access_id, access_key, **kwargs):
            captured.update(kwargs, access_id=access_id, access_key=access_key)

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

        def call(self, operation_id, parameters):
            captured["call"] = (operation_id, parameters)
            return _Response()

    return DummyClient


def test_cli_respects_env_cert_and_verify_true(monkeypatch, tmp_path):
    cert = tmp_path / "ca.pem"
    cert.write_text("dummy", encoding="utf-8")
    captured: dict[str, object] = {}
    monkeypatch.setattr("baas_client.cli.BaaSClient", _dummy_client(captured))

    result = runner.invoke(
        app, ARGS, env={"BAAS_CA_CERT": str(cert), "BAAS_VERIFY_SSL": "1"}
    )

    assert result.exit_code == 0
    assert captured["ca_cert"] == str(cert)
    assert captured["reject_unauthorized"] is True
    assert captured["call"] == ("findRoleNameListUsingGET", {"sessionToken": "tok"})


def test_cli_env_verify_false_disables_verification(monkeypatch):
    captured: dict[str, object] = {}
    monkeypatch.setattr("baas_client.cli.BaaSClient", _dummy_client(captured))

    result = runner.invoke(app, ARGS, env={"BAAS_VERIFY_SSL": "0"})

    assert result.exit_code == 0
    assert captured["reject_unauthorized"] is False
    assert captured["ca_cert"] is None


def test_cli_env_credentials(monkeypatch):
    captured: dict[str, object] = {}
    monkeypatch.setattr("baas_client.cli.BaaSClient", _dummy_client(captured))

    result = runner.invoke(
        app,
        ["call", "findRoleNameListUsingGET", "--base-url", "http://baas.test/baasapi"],
        env={
            "BAAS_ACCESS_ID": "env-id",
            "BAAS_ACCESS_KEY": "env-key",
            "BAAS_SESSION_TOKEN": "env-tok",
        },
    )

    assert result.exit_code == 0
    assert captured["access_id"] == "env-id"
    assert captured["access_key"] == "env-key"
    assert captured["base_url"] == "http://baas.test/baasapi"
    assert captured["call"] == ("findRoleNameListUsingGET", {"sessionToken": "env-tok"})


def test_cli_env_cert_with_no_verify_rejected(tmp_path):
    cert = tmp_path / "ca.pem"
    cert.write_text("dummy", encoding="utf-8")

    result = runner.invoke(app, ARGS, env={"BAAS_CA_CERT": str(cert), "BAAS_VERIFY_SSL": "0"})

    assert result.exit_code != 0
    assert "Cannot combine --cert with --no-verify" in result.output
