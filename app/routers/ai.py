from fastapi import APIRouter

from app.models.schemas import InsightRequest, InsightResponse
from app.services.insights import get_financial_insights

router = APIRouter(tags=["ai"])


@router.post("/ai/insights", response_model=InsightResponse)
async def get_ai_insights(payload: InsightRequest):
    # The generator folds every failure into a user-facing message, so this is always a 200
    insights = await get_financial_insights(payload.transactions, payload.categories)
    return {"insights": insights}
