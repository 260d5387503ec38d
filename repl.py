import logging
import sys

from assigncalc.config import ConfigError, load_config
from assigncalc.runtime import run


if __name__ == "__main__":
    try:
        config = load_config()
    except ConfigError as e:
        print(e)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        for line in run(code, config):
            print(line)
