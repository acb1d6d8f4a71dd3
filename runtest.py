#!.venv/bin/python

# The shebang may point towards a venv, but CI executes python -m runtest

import logging
import os
import sys
import traceback
import unittest


if __name__ == "__main__":
    stream = sys.stdout

    def println(s: str = "") -> None:
        if s:
            stream.write(s)
        stream.write("\n")
        stream.flush()

    def heading(text: str) -> str:
        return f"\n━━━ {text} {'━' * max(0, 64 - len(text))}"

    println(heading("1. Setup"))
    println(f"Python: {sys.executable}")
    println(f"Prefix: {sys.prefix}")
    println(f"Current directory: {os.getcwd()}")

    # Surface the coercions to defaults while testing
    if "-v" in sys.argv[1:]:
        logging.basicConfig(level=logging.DEBUG)

    println(heading("2. Unit Testing"))
    try:
        runner = unittest.main(
            module="test",
            exit=False,
            testRunner=unittest.TextTestRunner(stream=stream),
        )
        sys.exit(not runner.result.wasSuccessful())
    except Exception as x:
        trace = traceback.format_exception(x)
        println("".join(trace))
        sys.exit(1)
