"""HTTP controllers for web API endpoints.

SECURITY: These controllers MUST NOT sign or broadcast transactions.
"""

from swapquote.web.controllers.chains import router as chains_router
from swapquote.web.controllers.quotes import router as quotes_router

__all__ = [
    "quotes_router",
    "chains_router",
]
