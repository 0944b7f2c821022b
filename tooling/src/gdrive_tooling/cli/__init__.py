"""`gdrive-tooling` command-line entry points."""


def exit_status(rc: int) -> int:
    """Process exit status for a run() return code; death by signal N becomes 128+N."""
    return 128 - rc if rc < 0 else rc
