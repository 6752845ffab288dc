"""
Odoo integration and provisioning services
"""
