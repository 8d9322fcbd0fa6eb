from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlalchemy.orm import Session

from store_admin import models
from store_admin.core.errors import Forbidden, NotFound, Unauthenticated
from store_admin.core.identity import IdentityContext
from store_admin.core.logger import setup_logger
from store_admin.services.store_service import store_service

logger = setup_logger("services.ownership")


class DenialReason(str, Enum):
    unauthenticated = "unauthenticated"
    not_owner = "not_owner"
    not_found = "not_found"


@dataclass(frozen=True)
class OwnershipResult:
    authorized: bool
    reason: Optional[DenialReason] = None
    store: Optional[models.Store] = None


def resolve_ownership(db: Session, user_id: Optional[str], store_id: str) -> OwnershipResult:
    """
    Decide whether ``user_id`` owns ``store_id``. Read-only.

    The answer is computed from the database on every call; nothing is
    cached between requests.
    """
    if not user_id:
        return OwnershipResult(authorized=False, reason=DenialReason.unauthenticated)

    store = store_service.get(db, store_id=store_id)
    if store is None:
        return OwnershipResult(authorized=False, reason=DenialReason.not_found)
    if store.user_id != user_id:
        return OwnershipResult(authorized=False, reason=DenialReason.not_owner, store=store)
    return OwnershipResult(authorized=True, store=store)


def raise_for_denial(result: OwnershipResult, identity: IdentityContext, store_id: str):
    if result.reason == DenialReason.unauthenticated:
        raise Unauthenticated()

    logger.warning(f"Ownership denied for user {identity.user_id} on store {store_id}: {result.reason.value}")
    if result.reason == DenialReason.not_found:
        raise NotFound("Store not found")
    raise Forbidden()


def require_ownership(db: Session, identity: IdentityContext, store_id: str) -> models.Store:
    result = resolve_ownership(db, identity.user_id, store_id)
    if not result.authorized:
        raise_for_denial(result, identity, store_id)
    return result.store
