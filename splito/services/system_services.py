from splito.core.config import settings

async def system_health():
    return {
        "status": "ok"
    }

async def system_info():
    return {
        "app": settings.APP_NAME,
        "share_tolerance": str(settings.SHARE_TOLERANCE),
        "balance_epsilon": str(settings.BALANCE_EPSILON),
        "balanced_tolerance": str(settings.BALANCED_TOLERANCE),
        "max_amount": str(settings.MAX_AMOUNT),
        "currency_symbol": settings.CURRENCY_SYMBOL,
    }
