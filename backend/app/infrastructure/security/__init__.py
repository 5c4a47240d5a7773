from .password_hasher import BcryptPasswordHasher
from .session_tokens import JwtSessionCodec

__all__ = ["BcryptPasswordHasher", "JwtSessionCodec"]
