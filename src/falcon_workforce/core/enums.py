from __future__ import annotations

from enum import Enum


class Permission(str, Enum):
    """Capabilities a role may hold. Values are the stable ids used in config."""

    ADD_USER = "addUser"
    EDIT_WAREHOUSE = "editWarehouse"
    ASSIGN_VEHICLE = "assignVehicle"
    VIEW_MAP = "viewMap"
    USE_INVENTORY = "useInventory"
    ASSIGN_TECHS = "assignTechs"
    VIEW_ASSIGNED_JOBS = "viewAssignedJobs"
    VIEW_ASSIGNED_TECH = "viewAssignedTech"
    TRACK_VEHICLE = "trackVehicle"
    CREATE_JOB = "createJob"
    MANAGE_ROLES = "manageRoles"
    ACCESS_SETTINGS = "accessSettings"

    @property
    def label(self) -> str:
        return PERMISSION_LABELS[self]


PERMISSION_LABELS: dict[Permission, str] = {
    Permission.ADD_USER: "Add Users",
    Permission.EDIT_WAREHOUSE: "Edit Warehouse",
    Permission.ASSIGN_VEHICLE: "Assign Vehicles",
    Permission.VIEW_MAP: "View Fleet Map",
    Permission.USE_INVENTORY: "Use Inventory",
    Permission.ASSIGN_TECHS: "Assign Techs",
    Permission.VIEW_ASSIGNED_JOBS: "View Assigned Jobs",
    Permission.VIEW_ASSIGNED_TECH: "View Assigned Tech",
    Permission.TRACK_VEHICLE: "Track Vehicle",
    Permission.CREATE_JOB: "Create Job",
    Permission.MANAGE_ROLES: "Manage Roles",
    Permission.ACCESS_SETTINGS: "Access Settings",
}


class SessionState(str, Enum):
    """Lifecycle of one worker's work session."""

    NOT_CLOCKED_IN = "NOT_CLOCKED_IN"
    WORKING = "WORKING"
    ON_LUNCH = "ON_LUNCH"
    CLOCKED_OUT = "CLOCKED_OUT"
