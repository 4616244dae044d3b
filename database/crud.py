from typing import Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from database.models import AuthorModel, BudgetModel
from models.budget import BudgetType

# Author lookup
def create_author(db: Session, name: str):
    """Crée un auteur (utilisé pour alimenter la base)"""
    db_author = AuthorModel(name=name)
    db.add(db_author)
    db.flush()
    return db_author

def get_author(db: Session, author_id: int) -> Optional[AuthorModel]:
    """Récupère un auteur par son ID, None s'il n'existe pas"""
    return db.get(AuthorModel, author_id)

# Budget records
def create_budget_record(
    db: Session,
    year: int,
    month: int,
    amount: int,
    type: BudgetType,
    author: Optional[AuthorModel] = None
):
    """Insère une ligne de budget et récupère son identifiant généré"""
    db_record = BudgetModel(
        year=year,
        month=month,
        amount=amount,
        type=type,
        author=author
    )
    db.add(db_record)
    db.flush()
    return db_record

def get_budget_record(db: Session, record_id: int) -> Optional[BudgetModel]:
    """Récupère une ligne de budget par son ID"""
    return db.get(BudgetModel, record_id)

def get_year_records_page(db: Session, year: int, limit: int, offset: int = 0) -> List[BudgetModel]:
    """
    Récupère une page des lignes d'une année.

    Tri: mois croissant, puis montant décroissant (l'ID départage les égalités).
    """
    return db.query(BudgetModel).filter(
        BudgetModel.year == year
    ).order_by(
        BudgetModel.month.asc(),
        BudgetModel.amount.desc(),
        BudgetModel.id.asc()
    ).offset(offset).limit(limit).all()

def get_year_stats(db: Session, year: int) -> Tuple[int, Dict[str, int]]:
    """
    Statistiques de toute l'année en une seule requête agrégée:
    nombre total de lignes et somme des montants par type.

    Les types sans ligne sont absents du dictionnaire.
    """
    count_by_type = func.count(BudgetModel.id)
    amount_by_type = func.sum(BudgetModel.amount)

    rows = db.query(
        BudgetModel.type, count_by_type, amount_by_type
    ).filter(
        BudgetModel.year == year
    ).group_by(BudgetModel.type).all()

    total = sum(count for _, count, _ in rows)
    total_by_type = {
        budget_type.value: int(amount or 0)
        for budget_type, _, amount in rows
    }
    return total, total_by_type
