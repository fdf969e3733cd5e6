"""
Storefront checkout backend project package.
"""
