from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from database.database import Base
from models.budget import BudgetType

class AuthorModel(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

    budgets = relationship("BudgetModel", back_populates="author")

class BudgetModel(Base):
    __tablename__ = "budgets"

    id = Column(Integer, primary_key=True, index=True)
    year = Column(Integer, index=True, nullable=False)
    month = Column(Integer, nullable=False)  # 1-12, non validé
    amount = Column(Integer, nullable=False)  # unités mineures (centimes)
    type = Column(Enum(BudgetType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    author_id = Column(Integer, ForeignKey("authors.id"), nullable=True)

    author = relationship("AuthorModel", back_populates="budgets")
