import time
from hrpph import HashGenerator
from hrpph.Homo.utils import print_stage, log

def setup_system(threshold: int, k: int):
    start = time.time()
    gen = HashGenerator.setup(threshold, k, verbose=True)
    log("TA", f"產生 HashGenerator，n 長度 {gen.modulus.bit_length()} bits", time.time() - start)
    return gen

def commit_and_decode(gen: HashGenerator, values):
    for x in values:
        start = time.time()
        h = gen.hash(x)
        t_hash = time.time() - start
        start = time.time()
        y, ok = gen.eval(h)
        log("Prover", f"H({x}) -> r={h.r}", t_hash)
        log("Verifier", f"eval -> {y}, 在 [-{gen.threshold}, {gen.threshold}] 內: {ok}", time.time() - start)

def homomorphic_demo(gen: HashGenerator, x: int, y: int):
    hx, hy = gen.hash(x), gen.hash(y)
    s = hx + hy
    d = hx - hy
    log("Verifier", f"H({x}) + H({y}) == H({x + y}) ? {s == gen.hash(x + y)}")
    log("Verifier", f"H({x}) - H({y}) == H({x - y}) ? {d == gen.hash(x - y)}")
    log("Verifier", f"eval(H({x}) - H({y})) -> {gen.eval(d)}")

if __name__ == "__main__":
    print_stage("系統啟動 (threshold=50)")
    gen = setup_system(threshold=50, k=512)
    print_stage("承諾與解碼")
    commit_and_decode(gen, [7, -7, 50, -50, 1000])
    print_stage("同態加減")
    homomorphic_demo(gen, 30, 12)
    homomorphic_demo(gen, 10, 45)

    print_stage("系統啟動 (threshold=20000)")
    gen = setup_system(threshold=20000, k=512)
    commit_and_decode(gen, [12345, -19999, 20001])
    homomorphic_demo(gen, 15000, 9000)
