"""
Unit tests for the dependency registry.
"""

import pytest

from lambda_adapter.errors import DependencyNotRegisteredError
from lambda_adapter.kernel.registry import Registry, injectable


class AccountRepository:
    def __init__(self):
        self.accounts = {}


class AccountService:
    def __init__(self, repository: AccountRepository, page_size: int = 20):
        self.repository = repository
        self.page_size = page_size


class NotificationService:
    def __init__(self, sender: "EmailSender"):
        self.sender = sender


class EmailSender:
    pass


class TestRegistry:
    """Test cases for Registry."""

    def test_resolve_class_without_dependencies(self, registry):
        """Test resolving a class without constructor dependencies."""
        registry.register(AccountRepository)

        assert isinstance(registry.resolve(AccountRepository), AccountRepository)

    def test_resolve_builds_new_instances(self, registry):
        """Test that each resolve builds a new instance."""
        registry.register(AccountRepository)

        assert registry.resolve(AccountRepository) is not registry.resolve(AccountRepository)

    def test_resolve_annotated_dependencies(self, registry):
        """Test resolving constructor dependencies from annotations."""
        registry.register(AccountRepository)
        registry.register(AccountService)

        service = registry.resolve(AccountService)

        assert isinstance(service.repository, AccountRepository)
        assert service.page_size == 20

    def test_resolve_with_factory(self, registry):
        """Test resolving through a registered factory."""
        repository = AccountRepository()
        registry.register(AccountRepository, lambda: repository)

        assert registry.resolve(AccountRepository) is repository

    def test_resolve_unregistered_type(self, registry):
        """Test that resolving an unknown type raises DependencyNotRegisteredError."""
        with pytest.raises(DependencyNotRegisteredError) as exc_info:
            registry.resolve(AccountRepository)

        assert exc_info.value.impl is AccountRepository
        assert str(exc_info.value) == "AccountRepository not registered."

    def test_resolve_unregistered_dependency(self, registry):
        """Test that an unknown constructor dependency raises DependencyNotRegisteredError."""
        registry.register(NotificationService)

        with pytest.raises(DependencyNotRegisteredError) as exc_info:
            registry.resolve(NotificationService)

        assert exc_info.value.impl is EmailSender

    def test_is_registered(self, registry):
        """Test checking whether a type is registered."""
        assert registry.is_registered(AccountRepository) is False
        registry.register(AccountRepository)
        assert registry.is_registered(AccountRepository) is True


class TestInjectable:
    """Test cases for the injectable decorator."""

    def test_registers_in_process_registry(self):
        """Test that injectable registers the class in the process-wide registry."""
        @injectable
        class AuditLog:
            pass

        assert Registry.get_instance().is_registered(AuditLog)
        assert isinstance(Registry.get_instance().resolve(AuditLog), AuditLog)

    def test_get_instance_is_shared(self):
        """Test that the process-wide registry is a singleton."""
        assert Registry.get_instance() is Registry.get_instance()
