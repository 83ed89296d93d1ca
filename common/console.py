"""
Console helpers shared by the server and client entry points.
"""

import sys


def prompt_port(prompt: str, input_func=input) -> int:
    """
    Ask for a port number until a valid one is entered.

    Exits the process with status 1 if the console closes before a port is
    given.
    """
    while True:
        try:
            raw = input_func(prompt).strip()
        except EOFError:
            print("\nNo port number entered.", file=sys.stderr)
            sys.exit(1)
        try:
            port = int(raw)
        except ValueError:
            print(f"'{raw}' is not a port number.")
            continue
        if 0 <= port <= 65535:
            return port
        print(f"Port {port} is out of range (0-65535).")
