"""
Base repository.
Generic read/write helpers shared by every repository.
"""
from typing import TypeVar, Generic, Optional, List, Type
from sqlmodel import Session, select, func

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Generic base repository.

    Usage:
        class MyRepository(BaseRepository[MyModel]):
            def __init__(self, session: Session):
                super().__init__(session, MyModel)

    Repositories never commit on behalf of a multi-step operation; services
    that need a transaction call ``flush`` and commit themselves.
    """

    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    def get_by_id(self, id: int) -> Optional[T]:
        return self.session.get(self.model, id)

    def exists(self, id: int) -> bool:
        return self.get_by_id(id) is not None

    def get_all(self) -> List[T]:
        return list(self.session.exec(select(self.model)).all())

    def save(self, obj: T) -> T:
        """Adds, commits and refreshes a single record."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def count(self) -> int:
        result = self.session.exec(
            select(func.count()).select_from(self.model)
        ).first()
        return result or 0
