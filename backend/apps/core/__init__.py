"""
Core app: runtime configuration and the shared service layer.
"""
