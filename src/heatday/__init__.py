# SPDX-License-Identifier: MIT

from heatday.cleanup import register_cleanup
from heatday.initialize import initialize
from heatday.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
