from .jwt_gen import JwtGeneratorService, TokenIssueError
from .jwt_verify import JwtVerificationService, TokenVerificationError

__all__ = [
    "JwtGeneratorService",
    "JwtVerificationService",
    "TokenIssueError",
    "TokenVerificationError",
]
