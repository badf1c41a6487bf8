"""Device command operations."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class CommandsResource(ResourceBase):
    def list(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getCommandStatusListUsingGET", parameters)

    def send(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("sendCommandsUsingPOST", parameters)

    def status(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getCommandStatusByCmdUuidUsingGET", parameters)
