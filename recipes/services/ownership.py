"""Single ownership check shared by every mutating operation."""

import logging

from recipes.exceptions import PermissionDeniedError

logger = logging.getLogger(__name__)


def caller_id(user):
    """Return the stable identity of an acting user, or None for anonymous callers."""
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    return user.pk


def is_owner(resource_owner_id, acting_id) -> bool:
    return acting_id is not None and resource_owner_id == acting_id


def assert_owner(resource_owner_id, acting_id, action):
    """Raise PermissionDeniedError unless `acting_id` owns the resource.

    `action` completes the message "You can only ...", e.g.
    "delete your own shopping lists".
    """
    if is_owner(resource_owner_id, acting_id):
        return
    logger.warning(
        "Ownership check failed: caller=%s owner=%s action=%s",
        acting_id, resource_owner_id, action,
    )
    raise PermissionDeniedError(f"You can only {action}.")
