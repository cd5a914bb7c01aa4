# SPDX-License-Identifier: MIT

from calgrid.initialize import initialize
from calgrid.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
