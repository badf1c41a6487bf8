"""Device share operations."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class SharesResource(ResourceBase):
    def list(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDeviceSharesListUsingGET", parameters)

    def create(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("addDeviceSharesUsingPOST", parameters)

    def get(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDeviceSharesByIdUsingGET", parameters)

    def delete(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("deleteDeviceSharesUsingDELETE", parameters)

    def shared_with_others(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDeviceShareOthersUsingGET", parameters)

    def shared_with_self(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDeviceShareSelfUsingGET", parameters)
