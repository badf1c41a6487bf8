"""External data operations."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class ExternalDataResource(ResourceBase):
    """Store and query records in named external data tables."""

    def get(self, parameters: Parameters = None) -> NormalizedResponse:
        """Fetch one record; ``id`` and ``externalDataName`` are required."""
        return self._call("findExternalDataByIdUsingGET", parameters)

    def create(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("addExternalDataUsingPOST", parameters)

    def update(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("updateExternalDataByIdUsingPUT", parameters)

    def delete(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("deleteExternalDataUsingDELETE", parameters)

    def query(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findExternalDataUsingPOST", parameters)

    def update_by_query(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("updateExternalDataUsingPUT", parameters)

    def delete_by_query(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("deleteExternalDataBySQLUsingDELETE", parameters)
