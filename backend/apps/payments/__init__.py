"""
Payments app for the storefront checkout.
Provides REST API endpoints for creating, updating and canceling
Stripe payment intents.
"""
