"""SQL templates, statistics tasks and table configuration."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class SqlTemplatesResource(ResourceBase):
    def list(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getTemplatesUsingGET", parameters)

    def get(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findTemplateByIdUsingGET", parameters)


class ReportsResource(ResourceBase):
    def stat_task_data(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findStatTaskDataUsingPOST", parameters)

    def table_config(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findTableConfigUsingGET", parameters)
