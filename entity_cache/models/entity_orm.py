"""SQLAlchemy ORM model for the durable entities table"""
from sqlalchemy import Column, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class EntityORM(Base):
    """SQLAlchemy ORM model for the entities table"""
    __tablename__ = 'entities'

    id = Column(String, primary_key=True)
    data = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<EntityORM(id='{self.id}')>"

    def to_dict(self) -> dict:
        """Convert ORM model to dictionary for Pydantic conversion"""
        return {
            'id': self.id,
            'data': self.data,
        }
