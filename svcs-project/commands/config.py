# The command: svcs config [<username>]
# What it does: Shows the configured username, or sets it when one is given
# How it does: A thin dispatcher over `read_config` / `write_config` in `utils/config.py`

import sys
from utils import config as config_utils

DESCRIPTION = "Get and set a username."

def run(args):
    store_root = args.store_root

    if not args.username:
        try:
            username = config_utils.read_config(store_root)
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            sys.exit(1)
        if not username:
            print("Please, tell me who you are.")
            return
        print(f"The username is {username}.")
        return

    try: # Set the username
        username = config_utils.write_config(store_root, args.username)
    except (OSError, ValueError) as e:
        print(f"{e}", file=sys.stderr)
        sys.exit(1)
    print(f"The username is {username}.")
