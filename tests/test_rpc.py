import datetime
import ipaddress
import socket

import grpc
import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import ExtendedKeyUsageOID, NameOID

from taurus.rpc import Manager


class NoopServer:
    def __init__(self):
        self.registered = []

    def register(self, server):
        self.registered.append(server)


class FailingServer:
    def register(self, server):
        raise ValueError("boom")


@pytest.fixture
def manager():
    m = Manager()
    yield m
    m.close()


def start_test_server(manager, key_file="", cert_file=""):
    manager.register_server("svc", NoopServer())
    handle = manager.init_server("svc", key_file, cert_file)
    port = handle.add_port("127.0.0.1:0")
    handle.start()
    return handle, f"127.0.0.1:{port}"


def write_self_signed_cert(directory):
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "127.0.0.1")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(1)
        .not_valid_before(now - datetime.timedelta(minutes=1))
        .not_valid_after(now + datetime.timedelta(hours=1))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .add_extension(x509.SubjectAlternativeName([x509.IPAddress(ipaddress.ip_address("127.0.0.1"))]), critical=False)
        .add_extension(x509.ExtendedKeyUsage([ExtendedKeyUsageOID.SERVER_AUTH]), critical=False)
        .sign(key, hashes.SHA256())
    )
    cert_file = directory / "server.crt"
    key_file = directory / "server.key"
    cert_file.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
    key_file.write_bytes(
        key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )
    )
    return str(cert_file), str(key_file)


def test_register_server_rejects_none(manager):
    with pytest.raises(ValueError, match="cannot be nil"):
        manager.register_server("svc", None)


def test_register_server_rejects_duplicate(manager):
    manager.register_server("svc", NoopServer())
    with pytest.raises(ValueError, match="already registered: svc"):
        manager.register_server("svc", NoopServer())


def test_init_server_requires_registration(manager):
    with pytest.raises(KeyError, match="not registered: missing"):
        manager.init_server("missing", "", "")


def test_init_server_calls_register(manager):
    service = NoopServer()
    manager.register_server("svc", service)
    handle = manager.init_server("svc", "", "")
    assert service.registered == [handle.server]
    assert handle.credentials is None
    handle.stop()


def test_init_server_wraps_register_failure(manager):
    manager.register_server("bad", FailingServer())
    with pytest.raises(RuntimeError, match="register grpc service bad: boom"):
        manager.init_server("bad", "", "")


def test_init_server_missing_tls_files(manager, tmp_path):
    manager.register_server("svc", NoopServer())
    with pytest.raises(OSError, match="create grpc tls credentials for svc"):
        manager.init_server("svc", str(tmp_path / "nokey"), str(tmp_path / "nocert"))


def test_register_client_and_close_without_tls(manager):
    handle, address = start_test_server(manager)
    try:
        manager.register_client("client", address, "", timeout=5)
        channel = manager.get_client("client")
        assert isinstance(channel, grpc.Channel)
        manager.close()
        with pytest.raises(KeyError, match="not registered: client"):
            manager.get_client("client")
    finally:
        handle.stop()


def test_register_client_with_tls(manager, tmp_path):
    cert_file, key_file = write_self_signed_cert(tmp_path)
    handle, address = start_test_server(manager, key_file, cert_file)
    try:
        manager.register_client("secure-client", address, cert_file, timeout=5)
        channel = manager.get_client("secure-client")
        call = channel.unary_unary("/svc.Noop/Missing")
        with pytest.raises(grpc.RpcError) as excinfo:
            call(b"", timeout=5)
        assert excinfo.value.code() == grpc.StatusCode.UNIMPLEMENTED
    finally:
        manager.close()
        handle.stop()


def test_register_client_rejects_duplicate(manager):
    handle, address = start_test_server(manager)
    try:
        manager.register_client("client", address, "", timeout=5)
        with pytest.raises(ValueError, match="already registered: client"):
            manager.register_client("client", address, "", timeout=5)
    finally:
        manager.close()
        handle.stop()


def test_register_client_times_out(manager):
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    with pytest.raises(TimeoutError, match="dial grpc client lost"):
        manager.register_client("lost", f"127.0.0.1:{port}", "", timeout=0.5)
    with pytest.raises(KeyError):
        manager.get_client("lost")


def test_get_client_unknown(manager):
    with pytest.raises(KeyError, match="grpc client not registered: nobody"):
        manager.get_client("nobody")