from lambda_adapter.kernel.registry import Registry, injectable

__all__ = ["Registry", "injectable"]
