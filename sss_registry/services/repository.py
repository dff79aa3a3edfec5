"""Generic table access shared by the applicant reader and writer"""
from sqlalchemy import asc, desc
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional


class TableRepository:
    """
    Create/read/update/delete for one table, parameterized by its model.
    Rows are matched with equality conditions given as {column: value}.
    Nothing here commits; the caller owns the transaction.
    """

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def column(self, name: str):
        """Resolve a column attribute, refusing names that are not on the table"""
        if name not in self.model.__table__.columns:
            raise ValueError(f"Unknown column '{name}' for table {self.table_name}")
        return getattr(self.model, name)

    def _query(self, where: Optional[Dict[str, Any]] = None):
        query = self.db.query(self.model)
        for name, value in (where or {}).items():
            query = query.filter(self.column(name) == value)
        return query

    def create(self, values: Dict[str, Any]):
        """Insert a row and flush so generated keys are available"""
        row = self.model(**values)
        self.db.add(row)
        self.db.flush()
        return row

    def first(self, where: Dict[str, Any]):
        return self._query(where).first()

    def all(
        self,
        where: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        direction: str = "ASC",
        limit: int = 0,
        offset: int = 0,
    ) -> List[Any]:
        """Select rows; limit=0 means no limit"""
        query = self._query(where)

        if order_by:
            direction = direction.upper()
            if direction not in ("ASC", "DESC"):
                raise ValueError(f"Invalid sort direction '{direction}'")
            ordering = desc if direction == "DESC" else asc
            query = query.order_by(ordering(self.column(order_by)))

        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        return query.all()

    def exists(self, where: Dict[str, Any]) -> bool:
        return self._query(where).first() is not None

    def update(self, values: Dict[str, Any], where: Dict[str, Any]) -> int:
        """UPDATE ... WHERE; returns the matched row count (0 when no row matches)"""
        if not values:
            return 0
        for name in values:
            self.column(name)
        return self._query(where).update(values, synchronize_session=False)

    def delete(self, where: Dict[str, Any]) -> int:
        return self._query(where).delete(synchronize_session=False)
