_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_RED = "\033[91m"
_RESET = "\033[0m"


def info(message: str) -> None:
    print(f"[pybuildj] {message}")


def step(tag: str, message: object) -> None:
    print(f"  {_YELLOW}[{tag}]{_RESET} {message}")


def done(message: str) -> None:
    print(f"[pybuildj] {_GREEN}{message}{_RESET}")


def error(message: str) -> str:
    return f"[pybuildj] {_RED}{message}{_RESET}"
