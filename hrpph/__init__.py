"""
hrpph package initializer.

匯出 HashGenerator 與 HashValue 類別，方便使用：
    from hrpph import HashGenerator, HashValue
"""
from .Homo.hashes import HashGenerator, HashValue
from .Homo.utils import modinverse
from .Homo.errors import HRPPHError, KeyGenerationError, InvariantError, ParameterMismatchError

__all__ = ["HashGenerator", "HashValue", "modinverse",
           "HRPPHError", "KeyGenerationError", "InvariantError", "ParameterMismatchError"]
