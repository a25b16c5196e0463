from .router import identicon_route


__all__ = ["identicon_route"]
