from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from store_admin import models, schemas
from store_admin.core.errors import (
    CatalogError,
    NotFound,
    PersistenceError,
    ReferenceConflict,
    Unauthenticated,
    ValidationError,
)
from store_admin.core.identity import IdentityContext
from store_admin.core.logger import setup_logger
from store_admin.services.base import StoreScopedService
from store_admin.services.ownership_service import (
    DenialReason,
    raise_for_denial,
    require_ownership,
    resolve_ownership,
)
from store_admin.services.store_service import store_service
from store_admin.utils.validation import Invalid, validate

logger = setup_logger("services.lifecycle")


@contextmanager
def persisting(db: Session, action: str, conflict: Optional[str] = None):
    """
    Roll back on any failure and report storage errors as ``PersistenceError``.

    When ``conflict`` is given, an integrity error (a foreign key the database
    enforces) is reported as ``ReferenceConflict`` with that message instead.
    """
    try:
        yield
    except CatalogError:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        if conflict:
            logger.warning(f"Integrity error while {action}: {str(e)}")
            raise ReferenceConflict(conflict) from e
        logger.error(f"Storage failure while {action}: {str(e)}", exc_info=True)
        raise PersistenceError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Storage failure while {action}: {str(e)}", exc_info=True)
        raise PersistenceError() from e


def parse_payload(schema: Type[BaseModel], payload: Any) -> BaseModel:
    result = validate(schema, payload)
    if isinstance(result, Invalid):
        raise ValidationError(errors=result.errors)
    return result.value


class ResourceLifecycle:
    """
    Create/read/update/delete rules shared by every store-scoped catalog resource.

    Every write re-checks that the caller owns the store named in the path
    before the body is looked at. Resource ids always come from the path,
    and lookups for writes are filtered by that store.
    """

    name: str
    service: StoreScopedService
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    # Plural name of the rows that point at this resource
    dependant_name: Optional[str] = None

    def get(self, db: Session, obj_id: str):
        return self.service.get(db, obj_id)

    def get_in_store(self, db: Session, store_id: str, obj_id: str):
        return self.service.get_in_store(db, store_id, obj_id)

    def list(self, db: Session, store_id: str):
        return self.service.get_multi(db, store_id)

    def reference_errors(self, db: Session, store_id: str, data: BaseModel) -> List[Dict[str, str]]:
        return []

    def check_references(self, db: Session, store_id: str, data: BaseModel):
        errors = self.reference_errors(db, store_id, data)
        if errors:
            raise ValidationError(errors=errors)

    def create(self, db: Session, identity: IdentityContext, store_id: str, payload: Any):
        require_ownership(db, identity, store_id)
        data = parse_payload(self.create_schema, payload)
        with persisting(db, f"creating {self.name}"):
            self.check_references(db, store_id, data)
            db_obj = self.service.create(db, store_id, data)
        logger.info(f"Created {self.name} {db_obj.id} in store {store_id}")
        return db_obj

    def update(self, db: Session, identity: IdentityContext, store_id: str, obj_id: str, payload: Any):
        require_ownership(db, identity, store_id)
        data = parse_payload(self.update_schema, payload)
        with persisting(db, f"updating {self.name} {obj_id}"):
            db_obj = self.service.get_in_store(db, store_id, obj_id)
            if db_obj is None:
                raise NotFound(f"{self.name.capitalize()} not found")
            self.check_references(db, store_id, data)
            db_obj = self.service.update(db, db_obj, data)
        logger.info(f"Updated {self.name} {obj_id} in store {store_id}")
        return db_obj

    def delete(self, db: Session, identity: IdentityContext, store_id: str, obj_id: str) -> schemas.DeleteResult:
        require_ownership(db, identity, store_id)
        conflict = f"Remove all {self.dependant_name} using this {self.name} first"
        with persisting(db, f"deleting {self.name} {obj_id}", conflict=conflict):
            db_obj = self.service.get_in_store(db, store_id, obj_id)
            if db_obj is not None and self.service.count_dependants(db, db_obj):
                raise ReferenceConflict(conflict)
            count = self.service.delete(db, store_id, obj_id)
        logger.info(f"Deleted {count} {self.name} row(s) with id {obj_id} in store {store_id}")
        return schemas.DeleteResult(count=count)


def missing_reference(db: Session, service: StoreScopedService, store_id: str, obj_id: str,
                      field: str, label: str) -> List[Dict[str, str]]:
    if service.get_in_store(db, store_id, obj_id) is None:
        return [{"field": field, "message": f"{label} not found in this store"}]
    return []


class StoreLifecycle:
    """Stores are the ownership root: creating one only needs an identity."""

    def list_owned(self, db: Session, identity: IdentityContext) -> List[models.Store]:
        if not identity.is_authenticated:
            raise Unauthenticated()
        return store_service.get_all_for_user(db, identity.user_id)

    def get_owned(self, db: Session, identity: IdentityContext, store_id: str) -> models.Store:
        return require_ownership(db, identity, store_id)

    def create(self, db: Session, identity: IdentityContext, payload: Any) -> models.Store:
        if not identity.is_authenticated:
            raise Unauthenticated()
        data = parse_payload(schemas.StoreCreate, payload)
        with persisting(db, "creating store"):
            store = store_service.create(db, data, user_id=identity.user_id)
        logger.info(f"Created store {store.id} for user {identity.user_id}")
        return store

    def update(self, db: Session, identity: IdentityContext, store_id: str, payload: Any) -> models.Store:
        store = require_ownership(db, identity, store_id)
        data = parse_payload(schemas.StoreUpdate, payload)
        with persisting(db, f"updating store {store_id}"):
            store = store_service.update(db, store, data, user_id=identity.user_id)
        logger.info(f"Updated store {store_id}")
        return store

    def delete(self, db: Session, identity: IdentityContext, store_id: str) -> schemas.DeleteResult:
        """
        Remove a store the caller owns. An unknown store id is not an error,
        the delete simply matches no rows.
        """
        result = resolve_ownership(db, identity.user_id, store_id)
        if not result.authorized and result.reason != DenialReason.not_found:
            raise_for_denial(result, identity, store_id)

        conflict = "Remove all products and categories first"
        with persisting(db, f"deleting store {store_id}", conflict=conflict):
            if result.authorized and store_service.count_dependants(db, store_id):
                raise ReferenceConflict(conflict)
            # Owner is part of the predicate, not just the check above
            count = store_service.delete_owned(db, store_id, identity.user_id)
        logger.info(f"Deleted {count} store row(s) with id {store_id}")
        return schemas.DeleteResult(count=count)
