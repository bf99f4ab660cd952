"""Domain layer — the model marshaling core and the concrete payment models.

This layer depends only on the stdlib. It never imports from services,
commands, or config. Models reach the remote API only through the
session handle they were built with; the one outward lookup is the
lazy fetch of the process-wide default session.
"""
