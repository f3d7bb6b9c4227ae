"""Domain constants for transaction analytics."""

from decimal import Decimal

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)

INSIGHT_WARNING = "warning"
INSIGHT_POSITIVE = "positive"
INSIGHT_SUGGESTION = "suggestion"

DEFAULT_PERIOD = "30d"
NO_CATEGORY_LABEL = "N/A"
DEFAULT_CURRENCY_SYMBOL = "R$"

# Rule engine thresholds.
TOP_CATEGORY_WARNING_PERCENT = Decimal("40")
TOP_CATEGORY_SUGGESTION_PERCENT = Decimal("25")
HIGH_AVERAGE_EXPENSE = Decimal("200")
LOW_ACTIVITY_TRANSACTION_COUNT = 5
MAX_SUGGESTIONS = 6

# Savings-band engine thresholds (percent of income saved).
SAVINGS_EXCELLENT_RATE = Decimal("80")
SAVINGS_GOOD_RATE = Decimal("50")
SAVINGS_MODERATE_RATE = Decimal("20")
PATTERN_CONSERVATIVE_RATE = Decimal("70")
PATTERN_BALANCED_RATE = Decimal("40")
PATTERN_MODERATE_RATE = Decimal("10")

TOP_CATEGORIES_LIMIT = 5

DEFAULT_INCOME_CATEGORIES = (
    "Salário",
    "Freelance",
    "Investimentos",
    "Venda",
    "Presente",
    "Outros",
)

DEFAULT_EXPENSE_CATEGORIES = (
    "Alimentação",
    "Transporte",
    "Moradia",
    "Saúde",
    "Educação",
    "Lazer",
    "Roupas",
    "Tecnologia",
    "Outros",
)

# Ordered: the first keyword contained in a description wins.
CATEGORY_KEYWORDS = (
    ("supermercado", "Alimentação"),
    ("restaurante", "Alimentação"),
    ("cinema", "Entretenimento"),
    ("netflix", "Entretenimento"),
    ("uber", "Transporte"),
    ("gasolina", "Transporte"),
    ("farmácia", "Saúde"),
    ("academia", "Saúde"),
    ("salário", "Trabalho"),
    ("freelance", "Trabalho"),
)
FALLBACK_CATEGORY = "Outros"
CATEGORIZATION_CONFIDENCE = Decimal("0.85")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSACTION_TYPES",
    "INSIGHT_WARNING",
    "INSIGHT_POSITIVE",
    "INSIGHT_SUGGESTION",
    "DEFAULT_PERIOD",
    "NO_CATEGORY_LABEL",
    "DEFAULT_CURRENCY_SYMBOL",
    "TOP_CATEGORY_WARNING_PERCENT",
    "TOP_CATEGORY_SUGGESTION_PERCENT",
    "HIGH_AVERAGE_EXPENSE",
    "LOW_ACTIVITY_TRANSACTION_COUNT",
    "MAX_SUGGESTIONS",
    "SAVINGS_EXCELLENT_RATE",
    "SAVINGS_GOOD_RATE",
    "SAVINGS_MODERATE_RATE",
    "PATTERN_CONSERVATIVE_RATE",
    "PATTERN_BALANCED_RATE",
    "PATTERN_MODERATE_RATE",
    "TOP_CATEGORIES_LIMIT",
    "DEFAULT_INCOME_CATEGORIES",
    "DEFAULT_EXPENSE_CATEGORIES",
    "CATEGORY_KEYWORDS",
    "FALLBACK_CATEGORY",
    "CATEGORIZATION_CONFIDENCE",
    "MONTH_NAMES",
]
