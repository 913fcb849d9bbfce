from timeit import timeit

from kappa.interpreter import Interpreter
from kappa.types.symbol import Symbol
from kappa.reader.lexer import Lexer
from kappa.reader.parser import Parser
from kappa.evaluation.evaluator import evaluate


def _parse_one(code: str):
    return Parser(Lexer(code)).parse()


def time_parse(code: str, rounds: int) -> float:
    return timeit(lambda: _parse_one(code), number=rounds)


def time_eval(code: str, rounds: int, setup: tuple[str, ...] = ()) -> float:
    """Parse once, then repeatedly evaluate the same tree in one session."""
    itp = Interpreter()
    for line in setup:
        itp.eval(line)
    expr = _parse_one(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


# Every lambda call copies the caller's environment, so call cost grows with
# the number of session bindings.
def bench_call_with_bindings(n_bindings: int, rounds: int = 2000) -> float:
    itp = Interpreter()
    for i in range(n_bindings):
        itp.env.define(Symbol(f"V{i}"), float(i))
    itp.eval("(defun add (a b) (+ a b))")
    expr = _parse_one("(add 1 2)")
    evaluate(expr, itp.env)
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


ARITH_CODE = "(+ 1 (- 10 (* 10 50)) (/ 100 4 5))"

NESTED_CALL_CODE = "(add (twice 3) (twice (add 1 2)))"
NESTED_CALL_SETUP = (
    "(defun add (a b) (+ a b))",
    "(defun twice (x) (* 2 x))",
)


if __name__ == "__main__":
    print("Benchmark: parse arithmetic")
    print(f"  time: {time_parse(ARITH_CODE, 20000):.6f}s  [rounds=20000]")

    print("Benchmark: evaluate arithmetic")
    print(f"  time: {time_eval(ARITH_CODE, 20000):.6f}s  [rounds=20000]")

    print("Benchmark: nested user function calls")
    print(f"  time: {time_eval(NESTED_CALL_CODE, 5000, NESTED_CALL_SETUP):.6f}s  [rounds=5000]")

    for n in (0, 100, 1000):
        print(f"Benchmark: lambda call with {n} extra bindings")
        print(f"  time: {bench_call_with_bindings(n):.6f}s  [rounds=2000]")
