"""JSON values, paths, block scopes, context navigation, helpers and errors for Handlebars-style templates."""

__version__ = "0.1.0"

__all__ = ["errors", "jsonvalue", "path", "block", "context", "extras", "casing"]