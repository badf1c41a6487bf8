"""Device operations."""

from __future__ import annotations

from ..http import NormalizedResponse
from .base import Parameters, ResourceBase


class DevicesResource(ResourceBase):
    """Interact with registered devices, their logs and their data."""

    def list(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDevicesListUsingGET", parameters)

    def create(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("addDeviceUsingPOST", parameters)

    def import_devices(self, parameters: Parameters = None) -> NormalizedResponse:
        """Bulk import; ``deviceImport`` holds the device list."""
        return self._call("addDevicesUsingPOST", parameters)

    def get(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDevicesByIdUsingGET", parameters)

    def update(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("updateDevicesUsingPUT", parameters)

    def delete(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("deleteDevicesUsingDELETE", parameters)

    def enable(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("enableDevicesByIdUsingPUT", parameters)

    def disable(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("disableDevicesByIdUsingPUT", parameters)

    def assign(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("assignDevicesUsingPUT", parameters)

    def logs(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("getDeviceLogsListUsingGET", parameters)

    def query_alarms(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findDeviceAlarmUsingPOST", parameters)

    def query_data(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findDeviceDataUsingPOST", parameters)

    def query_stats(self, parameters: Parameters = None) -> NormalizedResponse:
        return self._call("findStatisticsDataUsingPOST", parameters)
