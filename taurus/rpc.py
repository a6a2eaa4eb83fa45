"""Registry of gRPC services and cached client channels."""

from __future__ import annotations

import threading
from concurrent import futures
from dataclasses import dataclass
from types import TracebackType
from typing import Protocol, runtime_checkable

import grpc

_BASE_DELAY_MS = 1000
_MAX_DELAY_MS = 60_000
_MIN_CONNECT_TIMEOUT_MS = 5000

_CHANNEL_OPTIONS = [
    ("grpc.initial_reconnect_backoff_ms", _BASE_DELAY_MS),
    ("grpc.max_reconnect_backoff_ms", _MAX_DELAY_MS),
    ("grpc.min_reconnect_backoff_ms", _MIN_CONNECT_TIMEOUT_MS),
]


@runtime_checkable
class Server(Protocol):
    """A logical service that adds its handlers to a gRPC server."""

    def register(self, server: grpc.Server) -> None: ...


@dataclass
class _InitializedServer:
    """A gRPC server together with the credentials its ports must use."""

    server: grpc.Server
    credentials: grpc.ServerCredentials | None = None

    def add_port(self, address: str) -> int:
        """Listen on ``address``, securely when credentials were given; return the bound port."""
        if self.credentials is not None:
            return self.server.add_secure_port(address, self.credentials)
        return self.server.add_insecure_port(address)

    def start(self) -> None:
        self.server.start()

    def stop(self, grace: float | None = None) -> None:
        self.server.stop(grace).wait()


def _read(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


class Manager:
    """Keeps registered services and open client channels by name."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._servers: dict[str, Server] = {}
        self._clients: dict[str, grpc.Channel] = {}

    def register_server(self, name: str, server: Server) -> None:
        """Register ``server`` under ``name``; raises ValueError if it is None or taken."""
        if server is None:
            raise ValueError("grpc server cannot be nil")
        with self._lock:
            if name in self._servers:
                raise ValueError(f"grpc server already registered: {name}")
            self._servers[name] = server

    def init_server(self, name: str, key_file: str = "", cert_file: str = "") -> _InitializedServer:
        """Create a gRPC server for the service ``name``, using TLS when both files are given."""
        with self._lock:
            service = self._servers.get(name)
        if service is None:
            raise KeyError(f"grpc server not registered: {name}")

        credentials = None
        if key_file and cert_file:
            try:
                credentials = grpc.ssl_server_credentials([(_read(key_file), _read(cert_file))])
            except (OSError, ValueError, RuntimeError) as exc:
                raise OSError(f"create grpc tls credentials for {name}: {exc}") from exc

        grpc_server = grpc.server(futures.ThreadPoolExecutor())
        try:
            service.register(grpc_server)
        except Exception as exc:
            grpc_server.stop(None)
            raise RuntimeError(f"register grpc service {name}: {exc}") from exc
        return _InitializedServer(grpc_server, credentials)

    def register_client(
        self, name: str, target: str, cert_file: str = "", timeout: float | None = None
    ) -> None:
        """Connect to ``target`` and cache the channel as ``name``.

        Blocks until the channel is ready; raises TimeoutError if that takes longer than
        ``timeout`` seconds. A ``cert_file`` holds the root certificate for TLS.
        """
        with self._lock:
            if name in self._clients:
                raise ValueError(f"grpc client already registered: {name}")

            if cert_file:
                try:
                    credentials = grpc.ssl_channel_credentials(root_certificates=_read(cert_file))
                except (OSError, ValueError, RuntimeError) as exc:
                    raise OSError(f"create grpc client tls credentials for {name}: {exc}") from exc
                channel = grpc.secure_channel(target, credentials, options=_CHANNEL_OPTIONS)
            else:
                channel = grpc.insecure_channel(target, options=_CHANNEL_OPTIONS)

            try:
                grpc.channel_ready_future(channel).result(timeout=timeout)
            except grpc.FutureTimeoutError as exc:
                channel.close()
                raise TimeoutError(f"dial grpc client {name} ({target}): timed out") from exc

            self._clients[name] = channel

    def get_client(self, name: str) -> grpc.Channel:
        """Return the channel registered as ``name``; raises KeyError if there is none."""
        with self._lock:
            try:
                return self._clients[name]
            except KeyError:
                raise KeyError(f"grpc client not registered: {name}") from None

    def close(self) -> None:
        """Close and forget every client channel; raises RuntimeError listing any failures."""
        failures: list[str] = []
        with self._lock:
            for name, channel in list(self._clients.items()):
                try:
                    channel.close()
                except Exception as exc:
                    failures.append(f"close grpc client {name}: {exc}")
                del self._clients[name]
        if failures:
            raise RuntimeError("\n".join(failures))

    def __enter__(self) -> Manager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()