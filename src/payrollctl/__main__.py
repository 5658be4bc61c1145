"""Allow ``python -m payrollctl``."""

from payrollctl.cli import cli

if __name__ == "__main__":
    cli()
