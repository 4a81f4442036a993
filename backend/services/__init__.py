"""devkit services module"""

from backend.services.devkit_service import (
    php_to_json_service,
    json_to_php_service,
    ddl_parse_service,
    json_diff_service,
)

__all__ = [
    "php_to_json_service",
    "json_to_php_service",
    "ddl_parse_service",
    "json_diff_service",
]
