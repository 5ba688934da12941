"""Application configuration model."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class LoopbackMode(enum.IntEnum):
    """Role the application plays."""

    NONE = 0
    CLIENT = 0
    SERVER = 1


class ProtocolType(enum.IntEnum):
    """Transport protocol carried between client and server."""

    NONE = 0
    TCP = 0
    SSL = 1
    TLS = 2
    ENCRYPTOR = 3
    WEBSOCKET = 4
    WEBSOCKET_SSL = 5
    WEBSOCKET_TLS = 6


@dataclass
class SslConfiguration:
    """Certificate and cipher settings for SSL/TLS transports."""

    host: str = ""
    verify_peer: bool = True
    certificate_file: str = ""
    certificate_key_file: str = ""
    certificate_chain_file: str = ""
    certificate_key_password: str = ""
    ciphersuites: str = ""

    def reset(self) -> None:
        """Clear every setting back to its default."""
        self.host = ""
        self.verify_peer = True
        self.certificate_file = ""
        self.certificate_key_file = ""
        self.certificate_chain_file = ""
        self.certificate_key_password = ""
        self.ciphersuites = ""


@dataclass
class WebSocketConfiguration:
    """Host header and request path for WebSocket transports."""

    host: str = ""
    path: str = ""


@dataclass
class EncryptorConfiguration:
    """Cipher method and password for the encrypted transport."""

    method: str = ""
    password: str = ""


@dataclass
class EndpointConfiguration:
    """An address and port, where the address may be a domain name."""

    ip: str = ""
    port: int = 0
    domain: bool = False


@dataclass
class TimeoutConfiguration:
    """A timeout in seconds."""

    timeout: int = 10


@dataclass
class ProtocolsConfiguration:
    """Per-protocol settings."""

    websocket: WebSocketConfiguration = field(default_factory=WebSocketConfiguration)
    ssl: SslConfiguration = field(default_factory=SslConfiguration)
    encryptor: EncryptorConfiguration = field(default_factory=EncryptorConfiguration)


@dataclass
class AppConfiguration:
    """Everything the client or server needs to run."""

    mode: LoopbackMode = LoopbackMode.CLIENT
    ip: str = ""
    port: int = 0
    domain: bool = False
    inbound: EndpointConfiguration = field(default_factory=EndpointConfiguration)
    outbound: EndpointConfiguration = field(default_factory=EndpointConfiguration)
    alignment: int = 0
    backlog: int = 511
    inversion: bool = False
    fast_open: bool = False
    turbo: bool = False
    keep_alived: bool = False
    connect: TimeoutConfiguration = field(default_factory=lambda: TimeoutConfiguration(10))
    handshake: TimeoutConfiguration = field(default_factory=lambda: TimeoutConfiguration(5))
    protocol: ProtocolType = ProtocolType.TCP
    protocols: ProtocolsConfiguration = field(default_factory=ProtocolsConfiguration)