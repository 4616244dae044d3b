"""
Service de consultation et d'enregistrement des lignes de budget

Chaque opération publique s'exécute dans sa propre unité de travail
(session_scope) et le travail bloquant est envoyé dans le pool de threads,
l'appelant se contente d'attendre le résultat.
"""
import logging
from typing import Optional
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from database.database import SessionLocal, session_scope
from database.crud import (
    get_author, create_budget_record, get_budget_record,
    get_year_records_page, get_year_stats
)
from database.models import BudgetModel
from models.budget import BudgetRecord, BudgetYearParam, BudgetYearStatsResponse
from services.errors import AuthorNotFoundError

logger = logging.getLogger(__name__)

def to_budget_record(entity: BudgetModel) -> BudgetRecord:
    """Convertit une ligne persistée en BudgetRecord (l'auteur est réduit à son ID)"""
    return BudgetRecord(
        id=entity.id,
        year=entity.year,
        month=entity.month,
        amount=entity.amount,
        type=entity.type,
        author_id=entity.author_id
    )

class BudgetService:
    """Service des lignes de budget: insertion et statistiques annuelles"""

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    async def add_record(self, record: BudgetRecord) -> BudgetRecord:
        """
        Enregistre une nouvelle ligne de budget

        Args:
            record: Ligne à enregistrer (authorId optionnel)

        Returns:
            La ligne persistée, avec son identifiant

        Raises:
            AuthorNotFoundError: si authorId ne correspond à aucun auteur
        """
        return await run_in_threadpool(self._add_record, record)

    async def get_year_stats(self, param: BudgetYearParam) -> BudgetYearStatsResponse:
        """
        Statistiques d'une année et page de ses lignes

        total et totalByType portent sur toute l'année, indépendamment
        de limit/offset.
        """
        return await run_in_threadpool(self._get_year_stats, param)

    async def get_record(self, record_id: int) -> Optional[BudgetRecord]:
        """Récupère une ligne par son ID, None si elle n'existe pas"""
        return await run_in_threadpool(self._get_record, record_id)

    def _add_record(self, record: BudgetRecord) -> BudgetRecord:
        with session_scope(self.session_factory) as db:
            author = self._resolve_author(db, record.author_id)
            entity = create_budget_record(
                db,
                year=record.year,
                month=record.month,
                amount=record.amount,
                type=record.type,
                author=author
            )
            result = to_budget_record(entity)
        logger.info(f"Ligne de budget {result.id} créée ({result.year}-{result.month}, {result.type.value})")
        return result

    def _get_year_stats(self, param: BudgetYearParam) -> BudgetYearStatsResponse:
        # TODO: appliquer param.author_name (filtre sur authors.name) une fois le besoin produit confirmé
        if param.author_name:
            logger.debug(f"Filtre authorName '{param.author_name}' ignoré")

        with session_scope(self.session_factory) as db:
            page = get_year_records_page(db, param.year, param.limit, param.offset)
            items = [to_budget_record(entity) for entity in page]
            total, total_by_type = get_year_stats(db, param.year)

        logger.debug(f"Stats {param.year}: {total} ligne(s), page de {len(items)}")
        return BudgetYearStatsResponse(
            total=total,
            total_by_type=total_by_type,
            items=items
        )

    def _get_record(self, record_id: int) -> Optional[BudgetRecord]:
        with session_scope(self.session_factory) as db:
            entity = get_budget_record(db, record_id)
            return to_budget_record(entity) if entity is not None else None

    @staticmethod
    def _resolve_author(db: Session, author_id: Optional[int]):
        if author_id is None:
            return None
        author = get_author(db, author_id)
        if author is None:
            raise AuthorNotFoundError(author_id)
        return author
