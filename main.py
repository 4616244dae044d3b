from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import uvicorn
import os
import logging
from dotenv import load_dotenv

from database.database import init_db
from models.budget import BudgetRecord, BudgetYearParam, BudgetYearStatsResponse
from services.budget_service import BudgetService
from services.errors import AuthorNotFoundError

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

DEFAULT_LIMIT = int(os.getenv("BUDGET_DEFAULT_LIMIT", "10"))

app = FastAPI(title="Budget API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize database
init_db()

# Initialize services
budget_service = BudgetService()

@app.get("/")
async def root():
    return {"message": "Budget API"}

@app.post("/budget/add", response_model=BudgetRecord)
async def add_budget_record(record: BudgetRecord):
    """
    Enregistre une ligne de budget
    """
    try:
        return await budget_service.add_record(record)
    except AuthorNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Erreur lors de l'ajout de la ligne de budget: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Erreur: {str(e)}")

@app.get("/budget/year/{year}/stats", response_model=BudgetYearStatsResponse)
async def get_budget_year_stats(
    year: int,
    limit: int = Query(DEFAULT_LIMIT, description="Taille de la page"),
    offset: int = Query(0, description="Décalage de la page"),
    author_name: Optional[str] = Query(None, alias="authorName")
):
    """
    Statistiques d'une année (total, total par type) et page de ses lignes
    """
    try:
        param = BudgetYearParam(year=year, limit=limit, offset=offset, author_name=author_name)
        return await budget_service.get_year_stats(param)
    except Exception as e:
        logger.error(f"Erreur lors du calcul des statistiques {year}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Erreur: {str(e)}")

@app.get("/budget/{record_id}", response_model=BudgetRecord)
async def get_budget_record(record_id: int):
    """
    Récupère une ligne de budget par son ID
    """
    try:
        record = await budget_service.get_record(record_id)
    except Exception as e:
        logger.error(f"Erreur lors de la lecture de la ligne {record_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Erreur: {str(e)}")
    if record is None:
        raise HTTPException(status_code=404, detail="Ligne de budget non trouvée")
    return record

if __name__ == "__main__":
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
