from uds.configuration import (
    AppConfiguration,
    EncryptorConfiguration,
    EndpointConfiguration,
    LoopbackMode,
    ProtocolType,
    SslConfiguration,
    TimeoutConfiguration,
    WebSocketConfiguration,
)


def test_loopback_mode_client_is_none():
    config = AppConfiguration()
    assert config.mode is LoopbackMode.NONE
    assert config.mode is LoopbackMode.CLIENT
    assert LoopbackMode.SERVER == 1


def test_protocol_type_values():
    config = AppConfiguration()
    assert config.protocol is ProtocolType.NONE
    assert config.protocol is ProtocolType.TCP
    assert [p.value for p in ProtocolType] == [0, 1, 2, 3, 4, 5, 6]
    assert ProtocolType.WEBSOCKET_TLS == 6


def test_app_configuration_defaults():
    config = AppConfiguration()
    assert config.mode == LoopbackMode.CLIENT
    assert config.protocol == ProtocolType.TCP
    assert config.backlog == 511
    assert config.connect.timeout == 10
    assert config.handshake.timeout == 5
    assert config.alignment == 0
    assert config.inbound == EndpointConfiguration()
    assert config.protocols.ssl.verify_peer is True


def test_nested_defaults_not_shared():
    first = AppConfiguration()
    second = AppConfiguration()
    first.inbound.port = 8080
    first.connect.timeout = 30
    first.protocols.websocket.path = "/ws"
    assert second.inbound.port == 0
    assert second.connect.timeout == 10
    assert second.protocols.websocket.path == ""


def test_ssl_reset_clears_everything():
    password = "password"
    ssl = SslConfiguration(
        host="example.com",
        verify_peer=False,
        certificate_file="cert.pem",
        certificate_key_file="key.pem",
        certificate_chain_file="chain.pem",
        certificate_key_password=password,
        ciphersuites="TLS_AES_128_GCM_SHA256",
    )
    ssl.reset()
    assert ssl == SslConfiguration()
    assert ssl.verify_peer is True


def test_timeout_default():
    assert TimeoutConfiguration().timeout == 10


def test_simple_sections_equality():
    password = "password"
    assert EncryptorConfiguration("aes-128-cfb", password) == EncryptorConfiguration(
        method="aes-128-cfb", password=password
    )
    assert WebSocketConfiguration("example.com", "/") != WebSocketConfiguration()