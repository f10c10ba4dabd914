from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import MANYTOONE, Session

from rewards_optimizer.db.db import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Lookup/save/delete by primary key for one mapped entity.

    Every mutating call is a single unit of work: it commits on success and
    rolls back before re-raising on a database error.
    """

    model: Type[ModelT]

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def save(self, entity: ModelT) -> ModelT:
        """Insert when the entity has no id yet, otherwise overwrite the stored row."""
        entity.validate()
        try:
            if entity.id is None:
                self.db.add(entity)
            elif not inspect(entity).persistent:
                self._clear_unset_columns(entity)
                entity = self.db.merge(entity)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        """Delete the row if present; a missing id is not an error."""
        try:
            self.db.query(self.model).filter(self.model.id == entity_id).delete(synchronize_session="fetch")
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def count(self) -> int:
        return self.db.query(self.model).count()

    @staticmethod
    def _clear_unset_columns(entity: ModelT) -> None:
        # merge() only copies attributes present on the instance; null out the
        # rest so the stored row is replaced, not patched
        mapper = inspect(type(entity))
        for rel in mapper.relationships:
            if rel.direction is not MANYTOONE or rel.key not in entity.__dict__:
                continue
            # owner set through the relationship: carry its key onto the FK column
            related = entity.__dict__[rel.key]
            for local, remote in rel.local_remote_pairs:
                fk_key = mapper.get_property_by_column(local).key
                setattr(entity, fk_key, None if related is None else getattr(related, remote.key))
        for attr in mapper.column_attrs:
            column = attr.columns[0]
            if attr.key not in entity.__dict__ and column.default is None:
                setattr(entity, attr.key, None)
