"""
handlers/ - Presentation Layer
================================
Flask blueprints. Each handler receives an HTTP request, delegates to the
appropriate Service or Client, and renders the response (JSON or HTML).
No business logic lives here.
"""
