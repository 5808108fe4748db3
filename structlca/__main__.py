"""Entry point for the Speckle Automate runner: ``python -m structlca``."""

from __future__ import annotations

import logging

from speckle_automate import execute_automate_function

from structlca.config import load_config
from structlca.speckle.function import FunctionInputs, automate_function


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=config["STRUCTLCA_LOG_LEVEL"].upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    execute_automate_function(automate_function, FunctionInputs)


if __name__ == "__main__":
    main()
