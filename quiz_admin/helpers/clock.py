import time


def now_ms() -> int:
    """Current time as epoch milliseconds, the unit every stored timestamp uses."""
    return int(time.time() * 1000)
