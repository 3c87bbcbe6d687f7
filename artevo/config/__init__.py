from artevo.config.resolvers import register_resolvers

__all__ = ["register_resolvers"]
