"""Domain layer for payroll application."""

_USECASES = {
    "CompanyUsecase": "payroll.domain.company",
    "PositionUsecase": "payroll.domain.position",
    "UserUsecase": "payroll.domain.user",
    "TransactionUsecase": "payroll.domain.transaction",
}

__all__ = list(_USECASES)


# Import usecases lazily to avoid circular imports with payroll.database.base
def __getattr__(name):
    if name in _USECASES:
        from importlib import import_module

        return getattr(import_module(_USECASES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
