import random
from typing import Optional, Tuple
from sympy import isprime

from hrpph.Homo.errors import KeyGenerationError


def print_stage(title: str):
    print("\n" + "="*10 + f" {title} " + "="*10)

def log(role: str, msg: str, duration: float = None):
    if duration is None:
        print(f"[{role}] {msg}")
    else:
        print(f"[{role}] {msg} 耗時: {duration:.4f} 秒")


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    擴展歐幾里得：回傳 (g, x, y)，滿足 a*x + b*y = g = gcd(a, b)
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y

def modinverse(a: int, m: int) -> Optional[int]:
    """a^{-1} mod m；gcd(a, m) != 1 時不存在，回傳 None"""
    g, x, _ = egcd(a, m)
    if g != 1:
        return None
    return x % m


def rand_below_bits(bits: int, rng: random.Random) -> int:
    # 均勻取 [0, 2^bits)
    return rng.getrandbits(bits)

def gen_prime(bits: int, rng: random.Random) -> int:
    # 最高兩位設為 1，兩個質數相乘剛好 2*bits 位
    top = (1 << (bits - 1)) | (1 << (bits - 2))
    while True:
        p = rng.getrandbits(bits) | top | 1
        if isprime(p):
            return p

def generate_rsa_modulus(bits: int, rng: random.Random, min_bits: int = 16) -> int:
    """
    產生 RSA 型的模數 n = p*q，n 的長度至少 bits 位。
    bits 小於 min_bits 時無法產生足夠大的兩個質數，直接丟 KeyGenerationError。
    """
    if not isinstance(bits, int) or isinstance(bits, bool) or bits < max(min_bits, 16):
        raise KeyGenerationError(f"無法產生 {bits} bits 的模數 (最少 {min_bits} bits)")
    half = (bits + 1) // 2
    p = gen_prime(half, rng)
    q = gen_prime(half, rng)
    while q == p:
        q = gen_prime(half, rng)
    n = p * q
    if n.bit_length() < bits:
        raise KeyGenerationError(f"模數長度 {n.bit_length()} < {bits}")
    return n
