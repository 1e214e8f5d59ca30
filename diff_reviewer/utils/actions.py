"""GitHub Actions step outputs."""

import logging
import os

logger = logging.getLogger(__name__)


def set_output(name: str, value: str | int) -> None:
    """Expose a step output to later workflow steps.

    Appends to the file named by GITHUB_OUTPUT; outside of Actions the value
    is only logged.
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        logger.debug(f"OUTPUT: {name}={value}")
        return

    with open(output_file, "a", encoding="utf-8") as f:
        f.write(f"{name}={value}\n")
