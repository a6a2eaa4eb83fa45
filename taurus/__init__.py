"""General-purpose helpers: utilities, geometries, templates, logging, a notification model, gRPC and RSA keys."""

__version__ = "0.1.0"