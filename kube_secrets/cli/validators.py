"""Input validation for CLI arguments."""
import sys


def validate_filename(filename: str) -> None:
    """
    Validate that a secrets file path was given.

    Raises:
        SystemExit with code 2 if validation fails
    """
    if not filename:
        print("Error: Missing required parameter file", file=sys.stderr)
        print("\nUsage: kube-secrets <command> <file> [key]", file=sys.stderr)
        sys.exit(2)


def validate_key_argument(key: str) -> None:
    """
    Validate that a key was given for commands that need one.

    Raises:
        SystemExit with code 2 if validation fails
    """
    if not key:
        print("Error: Missing required parameter key", file=sys.stderr)
        print("\nUsage: kube-secrets <command> <file> <key>", file=sys.stderr)
        sys.exit(2)
