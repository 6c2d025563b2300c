"""Allow ``python -m osc633``."""

from osc633.cli import entrypoint

if __name__ == "__main__":
    entrypoint()
