class HRPPHError(Exception):
    """hrpph 所有錯誤的基底類別"""

class KeyGenerationError(HRPPHError, RuntimeError):
    """無法產生指定長度的大模數 n (setup 失敗，不重試)"""

class InvariantError(HRPPHError, ArithmeticError):
    """算術不變量被破壞，例如模反元素不存在"""

class ParameterMismatchError(InvariantError, ValueError):
    """兩個 HashValue 的 d 或 n 不同，不能合併"""
