"""Risk engine exceptions."""


class RiskEngineError(Exception):
    """Base class for errors raised by the risk engine."""


class PersistenceError(RiskEngineError):
    """The store rejected a write. The message is the store's own."""


class AlertNotFoundError(RiskEngineError, LookupError):
    pass


class SupplierNotFoundError(RiskEngineError, LookupError):
    pass
