from parsemaths.parser import ParserError, parse
from parsemaths.runtime import evaluate
from parsemaths.tokenizer import TokenizerError, strip_whitespace, tokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "(4+6)(3)",
    "80225/+2",
    "7/6/2000",
    "5^2",
    "2^3^2",
    "-2^2",
    "2*3+4*(4-5)+2^3/4",
    "(1 + 14 * (54^2))",
    "10 / 5/ 2",
    "1/0",
    "3(4)",
    "(1 + 2",
    "1.2.3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    code = strip_whitespace(code)
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        expression = parse(code)
    except ParserError as e:
        print(e)
        continue
    print(f"ast: {expression}")
    print(f"result: {evaluate(expression)}")
