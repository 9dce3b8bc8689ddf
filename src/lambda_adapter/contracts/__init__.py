from lambda_adapter.contracts.controller import Controller

__all__ = ["Controller"]
