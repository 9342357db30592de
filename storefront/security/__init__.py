# Request identity

from .identity import IdentityDependency, require_identity, optional_identity, IDENTITY_HEADER

__all__ = ["IdentityDependency", "require_identity", "optional_identity", "IDENTITY_HEADER"]
