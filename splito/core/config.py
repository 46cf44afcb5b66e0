from decimal import Decimal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Splito Settlement Engine"
    LOG_LEVEL: str = "INFO"

    # Shares may differ from the expense total by this much (currency units)
    SHARE_TOLERANCE: Decimal = Decimal("0.02")
    # Balances within this distance of zero are treated as settled
    BALANCE_EPSILON: Decimal = Decimal("1e-9")
    BALANCED_TOLERANCE: Decimal = Decimal("1e-6")

    # Largest single amount the ledger accepts; keeps sums well inside Decimal precision
    MAX_AMOUNT: Decimal = Decimal("1e15")

    CURRENCY_SYMBOL: str = "$"

    class Config:
        env_file = ".env"

settings = Settings()
