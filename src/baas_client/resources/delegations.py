"""Device delegation operations."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class DelegationsResource(ResourceBase):
    """Delegate devices to other users and inspect existing delegations."""

    def list(self, parameters: Parameters = None) -> NormalizedResponse:
        """List every delegation (super administrators only)."""
        return self._call("getDeviceDelegationsListUsingGET", parameters)

    def create(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("addDeviceDelegationsUsingPOST", parameters)

    def get(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDeviceDelegationsByIdUsingGET", parameters)

    def delete(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("deleteDeviceDelegationsUsingDELETE", parameters)

    def delegated_to_others(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDeviceDelegateOthersUsingGET", parameters)

    def delegated_to_self(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDeviceDelegateSelfUsingGET", parameters)
