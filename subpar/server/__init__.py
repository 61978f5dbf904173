"""HTTP service for the reflow filter.

WHY: Lets non-shell clients use the same reflow pipeline as the CLI.

HOW: app.py defines the FastAPI app, models.py its request/response
schemas.
"""
