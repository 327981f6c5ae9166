"""Binding config: which methods carry a body and which media types are JSON."""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BODY_METHODS = ("POST", "PUT", "PATCH", "DELETE")
DEFAULT_JSON_MEDIA_TYPES = ("application/json", "text/json")


def _split(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Config:
    """
    Activation settings. Pass to RequestModelActivator / CommandModule,
    or build from the environment with Config.load_from_env().
    """

    body_methods: tuple[str, ...] = DEFAULT_BODY_METHODS
    json_media_types: tuple[str, ...] = DEFAULT_JSON_MEDIA_TYPES
    encoding: str = "utf-8"

    def allows_body(self, method: str) -> bool:
        return (method or "").upper() in {m.upper() for m in self.body_methods}

    @classmethod
    def load_from_env(cls, prefix: str = "COMMAND_ROUTING_") -> Config:
        """
        Read overrides from os.environ. Lists are comma-separated:
        COMMAND_ROUTING_BODY_METHODS=POST,PUT
        COMMAND_ROUTING_JSON_MEDIA_TYPES=application/json,application/vnd.api+json
        COMMAND_ROUTING_ENCODING=utf-8
        """
        values: dict[str, str] = {}
        for key, value in os.environ.items():
            if key.startswith(prefix) and value:
                values[key[len(prefix):].lower()] = value
        kwargs: dict[str, object] = {}
        if "body_methods" in values:
            kwargs["body_methods"] = _split(values["body_methods"])
        if "json_media_types" in values:
            kwargs["json_media_types"] = _split(values["json_media_types"].lower())
        if "encoding" in values:
            kwargs["encoding"] = values["encoding"].strip()
        return cls(**kwargs)  # type: ignore[arg-type]
