"""Custom exceptions for Basket Tasks"""


class BasketError(Exception):
    """Base exception for all basket errors"""
    pass


class ConfigError(BasketError):
    """Configuration-related errors"""
    pass


class ConnectionError(BasketError):
    """LCD / FCD connection errors"""
    pass


class TransactionError(BasketError):
    """Transaction execution errors"""
    pass


class InsufficientBalanceError(BasketError):
    """Insufficient native or LP token balance"""
    pass


class QueryError(BasketError):
    """Contract query errors (contract not found, bad query msg, etc.)"""
    pass
