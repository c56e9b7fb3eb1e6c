"""
hrpph 設定
可用環境變數覆寫預設值
"""

import os

# 安全參數：大模數 n 的最少位數
DEFAULT_SECURITY_BITS = int(os.getenv('HRPPH_SECURITY_BITS', 1024))

# threshold 大於此值時 d = threshold // ENUM_DIVISOR，列舉次數約 2*ENUM_DIVISOR
DEFAULT_ENUM_DIVISOR = int(os.getenv('HRPPH_ENUM_DIVISOR', 100))

# 金鑰產生器最小可接受的模數長度
DEFAULT_MIN_MODULUS_BITS = int(os.getenv('HRPPH_MIN_MODULUS_BITS', 16))


class Config:
    """設定類"""

    def __init__(self):
        self.security_bits = DEFAULT_SECURITY_BITS
        self.enum_divisor = DEFAULT_ENUM_DIVISOR
        self.min_modulus_bits = DEFAULT_MIN_MODULUS_BITS


# 全局設定實例
config = Config()
