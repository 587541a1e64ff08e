# SPDX-License-Identifier: MIT

from kalendar.cleanup import register_cleanup
from kalendar.initialize import initialize
from kalendar.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
