# Seguridad - validación de identificadores antes de llegar al SQL
from core.security.identifier_validator import IdentifierValidator

__all__ = ["IdentifierValidator"]
