"""Allow running the CLI with ``python -m gcd_cli``."""

from gcd_cli.cli.main import run

if __name__ == "__main__":
    run()
