"""Custom permission and role lookups."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class PermissionsResource(ResourceBase):
    def list(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findCustomPermissionUsingGET", parameters)

    def for_user(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findCustomPermissionByUserUsingGET", parameters)


class RolesResource(ResourceBase):
    def allowing_registration(self, parameters: Parameters = None) -> NormalizedResponse:
        """Roles open to self-registration; authenticated by ``appToken`` only."""
        return self._call("findRoleAllowRegUsingGET", parameters)

    def offspring(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findRoleNameListUsingGET", parameters)
