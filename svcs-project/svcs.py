import argparse
import sys
from commands import config, add, log, commit, checkout
from utils import repository

# Commands in the order `svcs help` lists them
COMMANDS = {
    'config': config,
    'add': add,
    'log': log,
    'commit': commit,
    'checkout': checkout,
}

def build_help_description():
    lines = ["These are SVCS commands:"]
    for name, module in COMMANDS.items():
        lines.append(f"{name} {module.DESCRIPTION}")
    return "\n".join(lines)

def build_parser():
    # The main parser
    parser = argparse.ArgumentParser(prog="svcs", description="SVCS: A simple version control system.", add_help=False)
    parser.add_argument("-h", "--help", action="store_true", help="Show the list of commands.")
    subparsers = parser.add_subparsers(dest="command")

    # Command: help
    subparsers.add_parser("help", help="Show the list of commands.")

    # Command: config
    config_parser = subparsers.add_parser("config", help=config.DESCRIPTION)
    config_parser.add_argument("username", nargs="?", help="The username to record as commit author.")
    config_parser.set_defaults(func=config.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help=add.DESCRIPTION)
    add_parser.add_argument("file", nargs="?", help="File to track.")
    add_parser.set_defaults(func=add.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help=log.DESCRIPTION)
    log_parser.set_defaults(func=log.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help=commit.DESCRIPTION)
    commit_parser.add_argument("message", nargs="?", help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: checkout
    checkout_parser = subparsers.add_parser("checkout", help=checkout.DESCRIPTION)
    checkout_parser.add_argument("commit_id", nargs="?", help="The commit hash to restore.")
    checkout_parser.set_defaults(func=checkout.run)

    return parser

# The main entry point for the SVCS version control system
def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if argv and not argv[0].startswith('-') and argv[0] != 'help' and argv[0] not in COMMANDS:
        print(f"'{argv[0]}' is not a SVCS command.")
        return

    parser = build_parser()
    # Trailing arguments after the ones a command takes are ignored
    args, _ = parser.parse_known_args(argv)

    if args.help or not hasattr(args, 'func'):
        print(build_help_description())
        return

    try:
        args.store_root = repository.open_store()
    except OSError as e:
        print(f"error: cannot open store: {e}", file=sys.stderr)
        sys.exit(1)

    args.func(args)

if __name__ == "__main__":
    main()
