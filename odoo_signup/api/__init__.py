"""
API routers
"""

from odoo_signup.api import pages, signup

__all__ = [
    "pages",
    "signup",
]
