"""BaaS operation catalog.

Generated by ``baas generate`` from the service description. Do not edit by hand.
"""

from __future__ import annotations

from .endpoints import FORM_CONTENT_TYPE, Endpoint, Param

SERVICE_BASE_URL = "http://demo.heclouds.com/baasapi"

ENDPOINTS: tuple[Endpoint, ...] = (
    Endpoint(
        operation_id="deleteExternalDataBySQLUsingDELETE",
        method="DELETE",
        path="/v1.0/deleteExternalData",
        params=(
            Param("mongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getDevicesListUsingGET",
        method="GET",
        path="/v1.0/devices",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("deviceName", "query"),
            Param("deviceStatus", "query"),
            Param("deviceGroupId", "query"),
            Param("deviceOwner", "query"),
            Param("beginTime", "query"),
            Param("endTime", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="addDeviceUsingPOST",
        method="POST",
        path="/v1.0/devices",
        params=(
            Param("addDevice", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="findSingleArchiveUsingGET",
        method="GET",
        path="/v1.0/devices/archives",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("archiveName", "query"),
            Param("archiveId", "query"),
        ),
    ),
    Endpoint(
        operation_id="addArchivesUsingPOST",
        method="POST",
        path="/v1.0/devices/archives",
        params=(
            Param("addArchive", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="updateArchiveByIdUsingPUT",
        method="PUT",
        path="/v1.0/devices/archives",
        params=(
            Param("updateArchive", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="deleteArchivesUsingDELETE",
        method="DELETE",
        path="/v1.0/devices/archives",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("archiveName", "query"),
            Param("archiveId", "query"),
        ),
    ),
    Endpoint(
        operation_id="findSingleArchiveByDeviceIdUsingGET",
        method="GET",
        path="/v1.0/devices/archivesByDeviceId",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("archiveName", "query"),
            Param("deviceId", "query"),
        ),
    ),
    Endpoint(
        operation_id="deleteArchiveByDeviceIdUsingDELETE",
        method="DELETE",
        path="/v1.0/devices/archivesByDeviceId",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("archiveName", "query", required=True),
            Param("deviceId", "query", required=True),
        ),
    ),
    Endpoint(
        operation_id="assignDevicesUsingPUT",
        method="PUT",
        path="/v1.0/devices/assign",
        params=(
            Param("assignDevice", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getCommandStatusListUsingGET",
        method="GET",
        path="/v1.0/devices/commands/send",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("commandName", "query"),
            Param("deviceId", "query"),
            Param("deviceName", "query"),
            Param("status", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="sendCommandsUsingPOST",
        method="POST",
        path="/v1.0/devices/commands/send",
        params=(
            Param("sendCommandRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getCommandStatusByCmdUuidUsingGET",
        method="GET",
        path="/v1.0/devices/commands/send/{cmdUuid}",
        params=(
            Param("cmdUuid", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceDelegationsListUsingGET",
        method="GET",
        path="/v1.0/devices/delegations",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("deviceId", "query"),
            Param("fromUserLoginName", "query"),
            Param("toUserLoginName", "query"),
            Param("startDate", "query"),
            Param("endDate", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="addDeviceDelegationsUsingPOST",
        method="POST",
        path="/v1.0/devices/delegations",
        params=(
            Param("request", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceDelegateOthersUsingGET",
        method="GET",
        path="/v1.0/devices/delegations/delegateOthers",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("deviceId", "query"),
            Param("toUserLoginName", "query"),
            Param("toUserUserName", "query"),
            Param("startDate", "query"),
            Param("endDate", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceDelegateSelfUsingGET",
        method="GET",
        path="/v1.0/devices/delegations/delegateSelf",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("deviceId", "query"),
            Param("fromUserLoginName", "query"),
            Param("fromUserUserName", "query"),
            Param("startDate", "query"),
            Param("endDate", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceDelegationsByIdUsingGET",
        method="GET",
        path="/v1.0/devices/delegations/{delegateId}",
        params=(
            Param("delegateId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="deleteDeviceDelegationsUsingDELETE",
        method="DELETE",
        path="/v1.0/devices/delegations/{delegateId}",
        params=(
            Param("delegateId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="deleteArchivesBySQLUsingDELETE",
        method="DELETE",
        path="/v1.0/devices/deleteArchives",
        params=(
            Param("findMongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="disableDevicesByIdUsingPUT",
        method="PUT",
        path="/v1.0/devices/disable/{deviceId}",
        params=(
            Param("deviceId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="enableDevicesByIdUsingPUT",
        method="PUT",
        path="/v1.0/devices/enable/{deviceId}",
        params=(
            Param("deviceId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="addDevicesUsingPOST",
        method="POST",
        path="/v1.0/devices/import",
        params=(
            Param("deviceImport", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getDevicesByIdUsingGET",
        method="GET",
        path="/v1.0/devices/info/{deviceId}",
        params=(
            Param("deviceId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="updateDevicesUsingPUT",
        method="PUT",
        path="/v1.0/devices/info/{deviceId}",
        params=(
            Param("deviceId", "path", required=True),
            Param("updateDevice", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceLogsListUsingGET",
        method="GET",
        path="/v1.0/devices/logs",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("deviceId", "query"),
            Param("deviceName", "query"),
            Param("logType", "query"),
            Param("beginDate", "query"),
            Param("endDate", "query"),
            Param("userName", "query"),
            Param("operator", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="findDeviceAlarmUsingPOST",
        method="POST",
        path="/v1.0/devices/queryAlarms",
        params=(
            Param("findMongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="findArchivesUsingPOST",
        method="POST",
        path="/v1.0/devices/queryArchives",
        params=(
            Param("mongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="findDeviceDataUsingPOST",
        method="POST",
        path="/v1.0/devices/queryData",
        params=(
            Param("mongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="findStatisticsDataUsingPOST",
        method="POST",
        path="/v1.0/devices/queryStats",
        params=(
            Param("findMongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceSharesListUsingGET",
        method="GET",
        path="/v1.0/devices/shares",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("deviceId", "query"),
            Param("fromUserLoginName", "query"),
            Param("toUserLoginName", "query"),
            Param("startDate", "query"),
            Param("endDate", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="addDeviceSharesUsingPOST",
        method="POST",
        path="/v1.0/devices/shares",
        params=(
            Param("request", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceShareOthersUsingGET",
        method="GET",
        path="/v1.0/devices/shares/shareOthers",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("deviceId", "query"),
            Param("toUserLoginName", "query"),
            Param("toUserUserName", "query"),
            Param("startDate", "query"),
            Param("endDate", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceShareSelfUsingGET",
        method="GET",
        path="/v1.0/devices/shares/shareSelf",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("deviceId", "query"),
            Param("fromUserLoginName", "query"),
            Param("fromUserUserName", "query"),
            Param("startDate", "query"),
            Param("endDate", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="getDeviceSharesByIdUsingGET",
        method="GET",
        path="/v1.0/devices/shares/{shareId}",
        params=(
            Param("shareId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="deleteDeviceSharesUsingDELETE",
        method="DELETE",
        path="/v1.0/devices/shares/{shareId}",
        params=(
            Param("shareId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="updateArchivesUsingPUT",
        method="PUT",
        path="/v1.0/devices/updateArchives",
        params=(
            Param("findMongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="deleteDevicesUsingDELETE",
        method="DELETE",
        path="/v1.0/devices/{deviceId}",
        params=(
            Param("deviceId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="findExternalDataByIdUsingGET",
        method="GET",
        path="/v1.0/externalData",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("id", "query", required=True),
            Param("externalDataName", "query", required=True),
        ),
    ),
    Endpoint(
        operation_id="addExternalDataUsingPOST",
        method="POST",
        path="/v1.0/externalData",
        params=(
            Param("addExternalData", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="updateExternalDataByIdUsingPUT",
        method="PUT",
        path="/v1.0/externalData",
        params=(
            Param("updateExternalData", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="deleteExternalDataUsingDELETE",
        method="DELETE",
        path="/v1.0/externalData",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("externalDataName", "query", required=True),
            Param("recordId", "query", required=True),
        ),
    ),
    Endpoint(
        operation_id="findCustomPermissionUsingGET",
        method="GET",
        path="/v1.0/extraPermissions",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("customPermissionId", "query"),
            Param("customPermissionName", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="findCustomPermissionByUserUsingGET",
        method="GET",
        path="/v1.0/extraPermissions/user",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="loginUsingPOST",
        method="POST",
        path="/v1.0/login",
        params=(
            Param("appToken", "form", required=True),
            Param("loginName", "form", required=True),
            Param("password", "form", required=True),
        ),
        content_type=FORM_CONTENT_TYPE,
    ),
    Endpoint(
        operation_id="findExternalDataUsingPOST",
        method="POST",
        path="/v1.0/queryExternalData",
        params=(
            Param("findMongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="findStatTaskDataUsingPOST",
        method="POST",
        path="/v1.0/queryStatTaskData",
        params=(
            Param("findMongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="findTableConfigUsingGET",
        method="GET",
        path="/v1.0/queryTableConfig",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("tableType", "query", required=True),
            Param("tableName", "query"),
        ),
    ),
    Endpoint(
        operation_id="registerUserUsingPOST",
        method="POST",
        path="/v1.0/register",
        params=(
            Param("registerUserRequest", "body", required=True),
            Param("appToken", "query", required=True),
        ),
    ),
    Endpoint(
        operation_id="findRoleAllowRegUsingGET",
        method="GET",
        path="/v1.0/roles/allowReg",
        params=(
            Param("appToken", "query", required=True),
        ),
    ),
    Endpoint(
        operation_id="findRoleNameListUsingGET",
        method="GET",
        path="/v1.0/roles/offSpringRole",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getTemplatesUsingGET",
        method="GET",
        path="/v1.0/sqlTemplates",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("sqlType", "query"),
            Param("sqlTemplateType", "query"),
            Param("sqlTemplateName", "query"),
            Param("sqlDataTypes", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="findTemplateByIdUsingGET",
        method="GET",
        path="/v1.0/sqlTemplates/{sqlTemplateId}",
        params=(
            Param("sqlTemplateId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="updateExternalDataUsingPUT",
        method="PUT",
        path="/v1.0/updateExternalData",
        params=(
            Param("mongoDataRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getUsersUsingGET",
        method="GET",
        path="/v1.0/users",
        params=(
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("loginName", "query"),
            Param("status", "query"),
            Param("email", "query"),
            Param("mobile", "query"),
            Param("roleId", "query"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="insertUserUsingPOST",
        method="POST",
        path="/v1.0/users",
        params=(
            Param("addUserRequest", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="updateUserUsingPUT",
        method="PUT",
        path="/v1.0/users/child/{userId}",
        params=(
            Param("updateUserRequest", "body", required=True),
            Param("userId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="deleteUserByUserIdUsingDELETE",
        method="DELETE",
        path="/v1.0/users/child/{userId}",
        params=(
            Param("userId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="updatePasswordUsingPUT",
        method="PUT",
        path="/v1.0/users/updatePassword",
        params=(
            Param("password", "body", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="getUserByUserIdUsingGET",
        method="GET",
        path="/v1.0/users/{userId}",
        params=(
            Param("userId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="queryChildInfoUsingGET",
        method="GET",
        path="/v1.0/users/{userId}/childQuery",
        params=(
            Param("userId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
            Param("pageNum", "query"),
            Param("pageSize", "query"),
        ),
    ),
    Endpoint(
        operation_id="disableUserUsingPUT",
        method="PUT",
        path="/v1.0/users/{userId}/disable",
        params=(
            Param("userId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="enableUserUsingPUT",
        method="PUT",
        path="/v1.0/users/{userId}/enable",
        params=(
            Param("userId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
    Endpoint(
        operation_id="resetPasswordUsingPUT",
        method="PUT",
        path="/v1.0/users/{userId}/resetPassword",
        params=(
            Param("userId", "path", required=True),
            Param("sessionToken", "header", required=True, wire_name="session-token"),
        ),
    ),
)

OPERATIONS: dict[str, Endpoint] = {endpoint.operation_id: endpoint for endpoint in ENDPOINTS}
