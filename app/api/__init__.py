"""HTTP layer: routers, middleware and error handlers."""
