import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

from app.config import GEMINI_MODEL, GOOGLE_API_KEY
from app.models.schemas import Category, Transaction, TransactionType
from app.services.gemini import GeminiClient, create_client
from constants import CURRENCY_LABEL, MESSAGES, MIN_EXPENSE_TRANSACTIONS, PROMPTS, TOP_CATEGORY_LIMIT

logger = logging.getLogger(__name__)


def format_vnd(amount: Decimal | int | float) -> str:
    """
    Formats a number the way vi-VN locale does:
    '.' groups thousands, ',' marks decimals, at most 3 fraction digits.
    """
    value = Decimal(str(amount))
    # Enough precision for every integer digit plus 3 decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 5)
        value = value.quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    text = f"{value:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text.translate(str.maketrans(",.", ".,"))


class InsightGenerator:
    def __init__(self, client: GeminiClient | None):
        self.client = client

    @staticmethod
    def filter_expenses(transactions: Iterable[Transaction]) -> list[Transaction]:
        return [t for t in transactions if t.type == TransactionType.EXPENSE]

    @staticmethod
    def aggregate_category_spend(
        expenses: Iterable[Transaction], categories: Sequence[Category]
    ) -> dict[str, Decimal]:
        """
        Sums expense amounts per category name.
        Expenses pointing to an unknown category are left out of the breakdown.
        """
        # First category wins when ids repeat
        names_by_id = {}
        for category in categories:
            names_by_id.setdefault(category.id, category.name)

        totals = defaultdict(Decimal)
        orphaned = 0
        for txn in expenses:
            name = names_by_id.get(txn.category_id)
            if name is None:
                orphaned += 1
                continue
            totals[name] += txn.amount

        if orphaned:
            logger.debug(f"{orphaned} expense(s) reference unknown categories, excluded from breakdown")

        return dict(totals)

    @staticmethod
    def rank_top_categories(
        category_spend: dict[str, Decimal], limit: int = TOP_CATEGORY_LIMIT
    ) -> list[tuple[str, Decimal]]:
        # sorted() is stable, so equal totals keep first-seen order
        ranked = sorted(category_spend.items(), key=lambda item: item[1], reverse=True)
        return ranked[:limit]

    @staticmethod
    def format_top_categories(top_categories: list[tuple[str, Decimal]]) -> str:
        return ", ".join(f"{name}: {format_vnd(amount)} {CURRENCY_LABEL}" for name, amount in top_categories)

    @staticmethod
    def build_prompt(total_expense: Decimal, top_categories: str) -> str:
        return PROMPTS["saving_tips"].format(
            total_expense=format_vnd(total_expense),
            top_categories=top_categories,
        )

    async def generate_insights(self, transactions: Sequence[Transaction], categories: Sequence[Category]) -> str:
        """
        Builds a spending summary prompt and asks the model for saving tips.
        Never raises: every failure path returns one of the fallback messages.
        """
        # 1. Feature disabled, skip all work
        if self.client is None:
            return MESSAGES["ai_unavailable"]

        # 2. Only expenses matter for saving tips
        expenses = self.filter_expenses(transactions)
        if len(expenses) < MIN_EXPENSE_TRANSACTIONS:
            return MESSAGES["not_enough_data"]

        # 3. Aggregate
        total_expense = sum((t.amount for t in expenses), Decimal("0"))
        category_spend = self.aggregate_category_spend(expenses, categories)
        top_categories = self.format_top_categories(self.rank_top_categories(category_spend))

        prompt = self.build_prompt(total_expense, top_categories)

        try:
            return await self.client.send(prompt)
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}", exc_info=True)
            return MESSAGES["generation_error"]


# Process-wide client, None when AI is not configured
ai_client = create_client(GOOGLE_API_KEY, GEMINI_MODEL)


async def get_financial_insights(transactions: Sequence[Transaction], categories: Sequence[Category]) -> str:
    return await InsightGenerator(ai_client).generate_insights(transactions, categories)
