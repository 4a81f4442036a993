"""
Routers module
"""
from backend.routers.php_router import router as php_router
from backend.routers.ddl_router import router as ddl_router
from backend.routers.json_diff_router import router as json_diff_router

__all__ = [
    "php_router",
    "ddl_router",
    "json_diff_router",
]
