"""User account operations."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class UsersResource(ResourceBase):
    """Manage platform users and their child accounts."""

    def list(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getUsersUsingGET", parameters)

    def create(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("insertUserUsingPOST", parameters)

    def get(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getUserByUserIdUsingGET", parameters)

    def list_children(self, parameters: Parameters = None) -> NormalizedResponse:
        """Page through the child users of ``userId`` (``pageNum``/``pageSize``)."""
        return self._call("queryChildInfoUsingGET", parameters)

    def update_child(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("updateUserUsingPUT", parameters)

    def delete_child(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("deleteUserByUserIdUsingDELETE", parameters)

    def disable(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("disableUserUsingPUT", parameters)

    def enable(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("enableUserUsingPUT", parameters)

    def reset_password(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("resetPasswordUsingPUT", parameters)

    def update_password(self, parameters: Parameters = None) -> NormalizedResponse:
        """Change the caller's password; ``password`` carries old and new values."""
        return self._call("updatePasswordUsingPUT", parameters)
