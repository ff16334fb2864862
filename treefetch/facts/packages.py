import shutil
import subprocess

from treefetch.internal.logging import get_logger

logger = get_logger(__name__)

BREW_TIMEOUT_SECONDS = 10


def count_brew_packages(timeout: float = BREW_TIMEOUT_SECONDS) -> int:
    """
    Count installed Homebrew packages with a single `brew list` call.
    Returns 0 when brew is not installed, fails, or times out.
    """
    brew = shutil.which("brew")
    if brew is None:
        logger.debug("brew not found on PATH")
        return 0

    try:
        result = subprocess.run(
            [brew, "list"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired, UnicodeDecodeError) as e:
        logger.debug("brew list failed", error=str(e))
        return 0

    if result.returncode != 0:
        logger.debug("brew list exited with an error", returncode=result.returncode)
        return 0

    return sum(1 for line in result.stdout.splitlines() if line.strip())
