# Puertos del núcleo - Interfaces para dependencias externas

from core.ports.database_port import ColumnDescription, DatabaseConnection

__all__ = ["ColumnDescription", "DatabaseConnection"]
