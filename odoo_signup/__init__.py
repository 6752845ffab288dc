"""
Odoo Signup - provisions Odoo databases for new customers
"""

__version__ = "1.0.0"
