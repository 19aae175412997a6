"""CLI entrypoint for kube-secrets."""
import sys
import argparse
import logging

from kube_secrets.secrets.domains.config_loader import resolve_editor, resolve_log_level
from kube_secrets.secrets.domains.errors import USAGE_ERRORS, KubeSecretsError
from kube_secrets.secrets.workflows import secret_operations

from .validators import validate_filename, validate_key_argument

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    # Log to stderr so stdout only carries command output
    logging.basicConfig(
        level=resolve_log_level(verbose=verbose),
        format="%(message)s",
        stream=sys.stderr
    )


def cmd_version(args):
    """Show version information."""
    print(f"kube-secrets version {VERSION}")


def _update_sources(args):
    """Merge -u/-U given before the command with those given after it."""
    value = args.value or getattr(args, "global_value", "")
    value_file = args.value_file or getattr(args, "global_value_file", "")
    return value, value_file


def cmd_create(args):
    """Create a new secrets file holding one key."""
    validate_filename(args.filename)
    validate_key_argument(args.key)
    value, value_file = _update_sources(args)
    status = secret_operations.create_secret(
        args.filename,
        args.key,
        update_string=value,
        update_file=value_file,
        editor=resolve_editor(),
    )
    print(status.value)


def cmd_delete(args):
    """Remove a key from a secrets file."""
    validate_filename(args.filename)
    status = secret_operations.delete_secret(args.filename, args.key)
    print(status.value)


def cmd_keys(args):
    """List all keys in a secrets file."""
    validate_filename(args.filename)
    print(secret_operations.list_keys(args.filename), end="")


def cmd_show(args):
    """Print the decoded value of a key."""
    validate_filename(args.filename)
    validate_key_argument(args.key)
    value = secret_operations.show_secret(args.filename, args.key)
    if not value.endswith(b"\n"):
        value += b"\n"
    # Values may be binary, so bypass the text layer
    sys.stdout.flush()
    sys.stdout.buffer.write(value)
    sys.stdout.buffer.flush()


def cmd_update(args):
    """Update the value of a key, or add a new key."""
    validate_filename(args.filename)
    value, value_file = _update_sources(args)
    status = secret_operations.update_secret(
        args.filename,
        args.key,
        update_string=value,
        update_file=value_file,
        editor=resolve_editor(),
    )
    print(status.value)


def _add_value_options(subparser, prefix=""):
    subparser.add_argument(
        "-u", "--value",
        dest=prefix + "value",
        default="",
        metavar="STRING",
        help="String to set value with"
    )
    subparser.add_argument(
        "-U", "--value-file",
        dest=prefix + "value_file",
        default="",
        metavar="FILENAME",
        help="File to set value with"
    )


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="kube-secrets",
        description="Manage key/value entries of a Kubernetes Secret YAML file",
        epilog="""
Exit codes:
  0 - Success
  1 - Runtime error (file not found, not a secret, key not found, editor failure, etc.)
  2 - Usage error (missing key, -u and -U together, invalid arguments)

Environment variables:
  EDITOR                  - Editor used when no -u/-U value is given
  KUBE_SECRETS_LOG_LEVEL  - Log level (DEBUG, INFO, WARNING, ERROR)

Note: values are stored base64 encoded. Base64 is an encoding, not
encryption; treat secrets files as plain text.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    # Also accepted before the command: kube-secrets -u VALUE update FILE KEY
    _add_value_options(parser, prefix="global_")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    create_parser = subparsers.add_parser(
        "create",
        help="Create new secret file",
        description="Create a new secrets file (overwriting any existing one) holding a single key"
    )
    create_parser.add_argument("filename", help="Path to the secrets file")
    create_parser.add_argument("key", nargs="?", default="", help="Key to set")
    _add_value_options(create_parser)

    delete_parser = subparsers.add_parser("delete", help="Remove key")
    delete_parser.add_argument("filename", help="Path to the secrets file")
    delete_parser.add_argument("key", nargs="?", default="", help="Key to remove")

    _help_parser = subparsers.add_parser("help", help="Print usage")

    keys_parser = subparsers.add_parser("keys", help="List all keys in secret file")
    keys_parser.add_argument("filename", help="Path to the secrets file")

    show_parser = subparsers.add_parser("show", help="Print the decoded value of a key")
    show_parser.add_argument("filename", help="Path to the secrets file")
    show_parser.add_argument("key", nargs="?", default="", help="Key to show")

    update_parser = subparsers.add_parser(
        "update",
        help="Update value of key or create new key",
        description="""
Update the value of a key. The key is added if it does not exist yet.

Without -u or -U the current value is opened in $EDITOR. The file is
only rewritten when the value changed.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    update_parser.add_argument("filename", help="Path to the secrets file")
    update_parser.add_argument("key", nargs="?", default="", help="Key to update")
    _add_value_options(update_parser)

    _version_parser = subparsers.add_parser("version", help="Print version")

    return parser


def main(argv=None):
    """Main CLI entrypoint.

    Exit codes:
        0 - Success
        1 - Runtime errors (unreadable file, not a secret, key not found, editor failure, etc.)
        2 - Usage errors (missing key, conflicting -u/-U, invalid arguments)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    handlers = {
        "create": cmd_create,
        "delete": cmd_delete,
        "keys": cmd_keys,
        "show": cmd_show,
        "update": cmd_update,
        "version": cmd_version,
    }

    if args.command == "help":
        parser.print_help()
        return

    # If no command provided, show help and exit with usage error code
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(2)

    try:
        handler(args)
    except USAGE_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except KubeSecretsError as e:
        if e.detail:
            logger.debug(f"{e}: {e.detail}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
