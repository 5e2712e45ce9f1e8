"""Entry point kept minimal by delegating to Host.

The host owns the window and the frame scheduler; the simulation engine
itself is pluggable (see `config.ENGINE`).
"""

from core.host import Host


def main():
    Host().run()


if __name__ == "__main__":
    main()
