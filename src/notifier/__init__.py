"""
Retail Notifier Service Module.

This package contains the transactional email notifications of the retail
storefront, following the three-layer architecture pattern:

- handlers: Lambda entry wiring, HTTP concerns and error mapping
- logic: Variant descriptors, templates and the notification workflow
- dal: Email provider and user directory clients
- models: Request, response and configuration models
"""

__version__ = "1.0.0"
__description__ = "Transactional email notifications for the Retail App storefront"
