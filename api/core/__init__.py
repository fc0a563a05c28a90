"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses
(settings, logging, middleware, error handlers). Keep feature-specific
handlers and payloads in the corresponding feature package (e.g. `projects/`).
"""
