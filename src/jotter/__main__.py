import sys

from jotter.app import Application


def main() -> None:
    startup_path = sys.argv[1] if len(sys.argv) > 1 else ""
    Application(startup_path=startup_path).run()


if __name__ == "__main__":
    main()
