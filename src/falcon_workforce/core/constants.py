"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ROLE_PERMISSIONS = {
    "admin": [
        "addUser",
        "editWarehouse",
        "assignVehicle",
        "viewMap",
        "useInventory",
        "assignTechs",
        "viewAssignedJobs",
        "viewAssignedTech",
        "trackVehicle",
        "createJob",
        "manageRoles",
        "accessSettings",
    ],
    "manager": ["addUser", "assignVehicle", "viewMap", "editWarehouse", "useInventory", "viewAssignedJobs"],
    "dispatcher": ["assignTechs", "createJob", "viewMap"],
    "tech": ["useInventory", "viewAssignedJobs"],
    "customer": ["viewAssignedTech", "trackVehicle"],
}

DEFAULT_OVERTIME_THRESHOLD_HOURS = 8
OVERTIME_MULTIPLIER = "1.5"
