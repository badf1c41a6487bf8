import pytest

from baas_client import ClientConfig
from baas_client.config import DEFAULT_BASE_URL
from baas_client.exceptions import ConfigurationError
from baas_client.http import TransportOptions


@pytest.mark.parametrize("access_id,access_key", [("", "k"), ("id", ""), (None, "k")])
def test_credentials_are_required(access_id, access_key):
    with pytest.raises(ConfigurationError):
        ClientConfig(access_id=access_id, access_key=access_key)


def test_base_url_defaults_and_is_normalized():
    assert ClientConfig("id", "key").base_url == DEFAULT_BASE_URL
    assert ClientConfig("id", "key", base_url=None).base_url == DEFAULT_BASE_URL
    assert ClientConfig("id", "key", base_url="https://api.test/baas/").base_url == (
        "https://api.test/baas"
    )


def test_blank_base_url_is_rejected():
    with pytest.raises(ConfigurationError):
        ClientConfig("id", "key", base_url="   ")


def test_access_key_is_not_in_repr():
    config = ClientConfig("id", "super-secret-key")
    assert "super-secret-key" not in repr(config)


def test_transport_options_only_for_https():
    plain = ClientConfig("id", "key", base_url="http://api.test", ca_cert="ca.pem")
    secure = ClientConfig(
        "id", "key", base_url="https://api.test", ca_cert="ca.pem", reject_unauthorized=False
    )

    assert plain.transport_options() is None
    assert secure.transport_options() == TransportOptions(ca_cert="ca.pem", reject_unauthorized=False)


def test_transport_options_map_to_requests_verify():
    assert TransportOptions().requests_verify() is True
    assert TransportOptions(ca_cert="ca.pem").requests_verify() == "ca.pem"
    assert TransportOptions(ca_cert="ca.pem", reject_unauthorized=False).requests_verify() is False
