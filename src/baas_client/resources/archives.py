"""Device archive operations."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class ArchivesResource(ResourceBase):
    """Work with device archives, either by name/id or through Mongo-style queries."""

    def get(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findSingleArchiveUsingGET", parameters)

    def create(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("addArchivesUsingPOST", parameters)

    def update(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("updateArchiveByIdUsingPUT", parameters)

    def delete(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("deleteArchivesUsingDELETE", parameters)

    def get_by_device(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findSingleArchiveByDeviceIdUsingGET", parameters)

    def delete_by_device(self, parameters: Parameters = None) -> NormalizedResponse:
        """Both ``archiveName`` and ``deviceId`` are required here."""
        return self._call("deleteArchiveByDeviceIdUsingDELETE", parameters)

    def query(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findArchivesUsingPOST", parameters)

    def update_by_query(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("updateArchivesUsingPUT", parameters)

    def delete_by_query(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("deleteArchivesBySQLUsingDELETE", parameters)
