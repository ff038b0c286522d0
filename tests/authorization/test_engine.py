from __future__ import annotations

import pytest

from falcon_workforce.authorization.engine import ALL_PERMISSIONS, AuthorizationEngine
from falcon_workforce.authorization.model import AuthorizationConfig
from falcon_workforce.core.enums import Permission
from falcon_workforce.users.model import UserIdentity


@pytest.fixture
def engine() -> AuthorizationEngine:
    return AuthorizationEngine(AuthorizationConfig.default(super_admins=["root-uid"]))


def test_dispatcher_can_create_job_but_not_edit_warehouse():
    config = AuthorizationConfig.from_mapping({"dispatcher": ["assignTechs", "createJob", "viewMap"]})
    engine = AuthorizationEngine(config)
    user = UserIdentity(identity="u1", role="dispatcher")

    assert engine.has_permission(Permission.CREATE_JOB, user) is True
    assert engine.has_permission(Permission.EDIT_WAREHOUSE, user) is False


@pytest.mark.parametrize("role", ["janitor", "ADMIN", "", None])
def test_unknown_or_missing_role_gets_nothing(engine, role):
    user = UserIdentity(identity="x", role=role)

    assert engine.permissions_for(user) == frozenset()
    assert not any(engine.has_permission(p, user) for p in Permission)


@pytest.mark.parametrize("role", [None, "customer", "janitor"])
def test_super_admin_has_everything_regardless_of_role(engine, role):
    user = UserIdentity(identity="root-uid", role=role)

    assert all(engine.has_permission(p, user) for p in Permission)
    assert engine.permissions_for(user) == ALL_PERMISSIONS
    assert engine.is_super_admin(user)


def test_permissions_for_is_full_set_only_for_super_admin(engine):
    for role in ["admin", "manager", "dispatcher", "tech", "customer"]:
        granted = engine.permissions_for(UserIdentity(identity="someone", role=role))
        assert granted <= ALL_PERMISSIONS

    # admin role holds every permission, but is not a super-admin identity
    admin = UserIdentity(identity="someone", role="admin")
    assert engine.permissions_for(admin) == ALL_PERMISSIONS
    assert not engine.is_super_admin(admin)

    tech = UserIdentity(identity="someone", role="tech")
    assert engine.permissions_for(tech) == {Permission.USE_INVENTORY, Permission.VIEW_ASSIGNED_JOBS}


def test_no_role_does_not_match_role_named_empty_string():
    config = AuthorizationConfig.from_mapping({"": ["viewMap"]})
    engine = AuthorizationEngine(config)

    assert engine.has_permission(Permission.VIEW_MAP, UserIdentity(identity="a", role="")) is True
    assert engine.has_permission(Permission.VIEW_MAP, UserIdentity(identity="a", role=None)) is False


def test_permission_labels_follow_enumeration_order(engine):
    user = UserIdentity(identity="c1", role="customer")

    assert engine.permission_labels(user) == ["View Assigned Tech", "Track Vehicle"]


def test_every_permission_has_a_label():
    assert Permission.VIEW_MAP.label == "View Fleet Map"
    assert all(p.label for p in Permission)
