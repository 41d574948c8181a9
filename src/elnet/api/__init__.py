"""FastAPI transport layer for elnet.

Request models and routes over the service layer; no domain logic.

The ``create_app()`` factory is lazily imported so that
``import elnet.api`` never forces a FastAPI dependency.
"""


def create_app():
    """Deferred import of the FastAPI application factory."""
    from elnet.api.app import create_app as _create_app

    return _create_app()
