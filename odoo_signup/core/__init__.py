"""
Core configuration, errors and middleware
"""
