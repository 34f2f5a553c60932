from .retry import create_retry_decorator, RETRYABLE_EXCEPTIONS

__all__ = [
    'create_retry_decorator',
    'RETRYABLE_EXCEPTIONS',
]
