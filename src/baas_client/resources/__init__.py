"""Resource-specific convenience wrappers."""
from .archives import ArchivesResource
from .commands import CommandsResource
from .delegations import DelegationsResource
from .devices import DevicesResource
from .external_data import ExternalDataResource
from .permissions import PermissionsResource, RolesResource
from .reports import ReportsResource, SqlTemplatesResource
from .session import SessionResource, session_token
from .shares import SharesResource
from .users import UsersResource

__all__ = [
    "UsersResource",
    "DevicesResource",
    "ArchivesResource",
    "CommandsResource",
    "DelegationsResource",
    "SharesResource",
    "ExternalDataResource",
    "PermissionsResource",
    "RolesResource",
    "SqlTemplatesResource",
    "ReportsResource",
    "SessionResource",
    "session_token",
]
