from .require_ssl import RequireSSLMiddleware

__all__ = ["RequireSSLMiddleware"]
