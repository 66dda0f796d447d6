"""Lifecycle messages: initialize result, capability registration and tracing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from slangd.jsonutil import read_optional, read_required, write_optional
from slangd.server_capabilities import ServerCapabilities


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _list(value: Any) -> list:
    if not isinstance(value, list):
        raise TypeError(f"expected an array, got {type(value).__name__}")
    return value


def _options_to_json(value: Any) -> Any:
    to_json = getattr(value, "to_json", None)
    return to_json() if callable(to_json) else value


@dataclass
class ServerInfo:
    """Name and version the server reports about itself."""

    name: str
    version: str | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        write_optional(data, "version", self.version)
        return data

    @classmethod
    def from_json(cls, data: Any) -> ServerInfo:
        return cls(
            name=read_required(data, "name", _string),
            version=read_optional(data, "version", _string),
        )


@dataclass
class InitializeResult:
    """Result of the initialize request."""

    capabilities: ServerCapabilities = field(default_factory=ServerCapabilities)
    server_info: ServerInfo | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"capabilities": self.capabilities.to_json()}
        write_optional(data, "serverInfo", self.server_info, ServerInfo.to_json)
        return data

    @classmethod
    def from_json(cls, data: Any) -> InitializeResult:
        return cls(
            capabilities=read_required(
                data, "capabilities", ServerCapabilities.from_json
            ),
            server_info=read_optional(data, "serverInfo", ServerInfo.from_json),
        )


@dataclass
class Registration:
    """A capability the server registers dynamically."""

    id: str
    method: str
    register_options: Any = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "method": self.method}
        write_optional(data, "registerOptions", self.register_options, _options_to_json)
        return data

    @classmethod
    def from_json(cls, data: Any) -> Registration:
        return cls(
            id=read_required(data, "id", _string),
            method=read_required(data, "method", _string),
            register_options=read_optional(data, "registerOptions"),
        )


@dataclass
class RegistrationParams:
    """Parameters of the register-capability request."""

    registrations: list[Registration] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"registrations": [r.to_json() for r in self.registrations]}

    @classmethod
    def from_json(cls, data: Any) -> RegistrationParams:
        return cls(
            registrations=read_required(
                data,
                "registrations",
                lambda items: [Registration.from_json(i) for i in _list(items)],
            )
        )


@dataclass
class Unregistration:
    """A capability the server withdraws."""

    id: str
    method: str

    def to_json(self) -> dict[str, Any]:
        return {"id": self.id, "method": self.method}

    @classmethod
    def from_json(cls, data: Any) -> Unregistration:
        return cls(
            id=read_required(data, "id", _string),
            method=read_required(data, "method", _string),
        )


@dataclass
class UnregistrationParams:
    """Parameters of the unregister-capability request."""

    unregistrations: list[Unregistration] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"unregistrations": [u.to_json() for u in self.unregistrations]}

    @classmethod
    def from_json(cls, data: Any) -> UnregistrationParams:
        return cls(
            unregistrations=read_required(
                data,
                "unregistrations",
                lambda items: [Unregistration.from_json(i) for i in _list(items)],
            )
        )


@dataclass
class StaticRegistrationOptions:
    """Options carrying an id under which a registration can be withdrawn."""

    id: str | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        write_optional(data, "id", self.id)
        return data

    @classmethod
    def from_json(cls, data: Any) -> StaticRegistrationOptions:
        return cls(id=read_optional(data, "id", _string))


@dataclass
class LogTraceParams:
    """Parameters of the log-trace notification."""

    message: str
    verbose: str | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"message": self.message}
        write_optional(data, "verbose", self.verbose)
        return data

    @classmethod
    def from_json(cls, data: Any) -> LogTraceParams:
        return cls(
            message=read_required(data, "message", _string),
            verbose=read_optional(data, "verbose", _string),
        )