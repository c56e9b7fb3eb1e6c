# hashes.py
"""
Integer Close-To HRPPH (homomorphic range-preserving hash)

H(x) = (x mod d, a^x mod n)
  - a^x mod n 提供抗碰撞的承諾
  - x mod d 讓解碼時只需列舉同餘類中的 2s+1 個候選值
  - H(x) + H(y) = H(x + y)，H(x) - H(y) = H(x - y)
"""
import time
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from hrpph.config import config
from hrpph.Homo.errors import InvariantError, ParameterMismatchError
from hrpph.Homo.utils import modinverse, generate_rsa_modulus, rand_below_bits, log


@dataclass(frozen=True)
class HashValue:
    """
    r: x mod d，永遠在 [0, d)
    g: a^x mod n
    d: 小模數 (列舉用)
    n: 大模數 (抗碰撞用)
    """
    r: int
    g: int
    d: int
    n: int

    def __post_init__(self):
        if not (0 <= self.r < self.d):
            raise InvariantError(f"r={self.r} 不在 [0, {self.d})")

    def _check_compatible(self, other: "HashValue"):
        if self.d != other.d or self.n != other.n:
            raise ParameterMismatchError("HashValue 的 d 或 n 不一致，不能合併")

    def __add__(self, other: "HashValue") -> "HashValue":
        """H(x) + H(y) = (r_x + r_y mod d, g_x * g_y mod n)"""
        if not isinstance(other, HashValue):
            return NotImplemented
        self._check_compatible(other)
        return HashValue(
            r=(self.r + other.r) % self.d,
            g=(self.g * other.g) % self.n,
            d=self.d,
            n=self.n,
        )

    def inverse(self) -> "HashValue":
        """-H(x) = (d - r mod d, g^{-1} mod n)"""
        g_inv = modinverse(self.g, self.n)
        if g_inv is None:
            raise InvariantError("g 在 Z_n 中不可逆")
        return HashValue(r=(self.d - self.r) % self.d, g=g_inv, d=self.d, n=self.n)

    def __neg__(self) -> "HashValue":
        return self.inverse()

    def __sub__(self, other: "HashValue") -> "HashValue":
        if not isinstance(other, HashValue):
            return NotImplemented
        self._check_compatible(other)
        return self + other.inverse()


class HashGenerator:
    """
    t: threshold，判斷輸入是否落在 [-t, t]
    d: 小模數，用來列舉候選值
    s: t // d，單邊列舉次數
    a: 隨機底數 (每個實例各自不同)
    n: 大模數
    """
    def __init__(self, t: int, d: int, s: int, a: int, n: int):
        self._t = t
        self._d = d
        self._s = s
        self._a = a
        self._n = n

    @classmethod
    def setup(cls, threshold: int, security_bits: int = None, *,
              enum_divisor: int = None, rng: random.Random = None,
              verbose: bool = False) -> "HashGenerator":
        """
        給定 threshold 與安全參數 security_bits，產生一組 HashGenerator。
        - threshold <= enum_divisor 時 d = threshold，否則 d = threshold // enum_divisor
        - n 由 RSA 型金鑰產生取得，長度至少 security_bits 位
        - a 均勻取自 [0, 2^security_bits) 再 mod n
        """
        if security_bits is None:
            security_bits = config.security_bits
        if enum_divisor is None:
            enum_divisor = config.enum_divisor
        if isinstance(threshold, bool) or not isinstance(threshold, int) or not (1 <= threshold <= 0xFFFF):
            raise ValueError("threshold 必須在 [1, 65535]")
        if isinstance(enum_divisor, bool) or not isinstance(enum_divisor, int) or enum_divisor < 1:
            raise ValueError("enum_divisor 必須是正整數")
        if rng is None:
            rng = random.SystemRandom()

        d = threshold if threshold <= enum_divisor else threshold // enum_divisor

        start = time.time()
        n = generate_rsa_modulus(security_bits, rng, config.min_modulus_bits)
        if verbose:
            log("Setup", f"產生大模數 n，長度 {n.bit_length()} bits", time.time() - start)

        a = rand_below_bits(security_bits, rng) % n
        if verbose:
            log("Setup", f"threshold={threshold}, d={d}, s={threshold // d}")
        return cls(t=threshold, d=d, s=threshold // d, a=a, n=n)

    @property
    def threshold(self) -> int:
        return self._t

    t = threshold

    @property
    def d(self) -> int:
        return self._d

    @property
    def s(self) -> int:
        return self._s

    @property
    def a(self) -> int:
        return self._a

    @property
    def modulus(self) -> int:
        return self._n

    n = modulus

    def _power(self, x: int) -> int:
        # 負指數視為群中的反元素：a^{-k} = (a^k)^{-1}
        if x >= 0:
            return pow(self.a, x, self.n)
        inv = modinverse(pow(self.a, -x, self.n), self.n)
        if inv is None:
            raise InvariantError("a^x 與 n 不互質，模反元素不存在")
        return inv

    def hash(self, x: int) -> HashValue:
        if isinstance(x, bool) or not isinstance(x, int):
            raise ValueError("hash 的輸入必須是整數")
        return HashValue(r=x % self.d, g=self._power(x), d=self.d, n=self.n)

    def eval(self, h: HashValue) -> Tuple[Optional[int], bool]:
        """
        在 [-t, t] 中與 h.r 同餘 (mod d) 的候選值裡，由大到小逐一比對 a^c 是否等於 h.g。
        找到回傳 (c, True)，否則 (None, False)。
        """
        if h.d != self.d or h.n != self.n:
            raise ParameterMismatchError("HashValue 不是由此 generator 產生")
        step = self.d
        top = self.t
        bottom = -top

        c = self.s * self.d + h.r
        if c > top:
            c -= step
        # 用 >= 而非 >：-t 本身也要列舉，[-t, t] 內每個值都能解回
        while c >= bottom:
            if self._power(c) == h.g:
                return c, True
            c -= step
        return None, False
