# What it does: Manages all read/write operations for the store's `config.txt` file
# How it does: The file holds a single line, the username that is recorded as the author of new commits

from .repository import CONFIG_FILE, get_file_path, has_line_break, read_lines

def read_config(store_root): # Returns the configured username, or '' when none was set
    lines = read_lines(store_root, CONFIG_FILE)
    if not lines:
        return ''
    return lines[-1].strip()

def write_config(store_root, username): # Replaces the stored username
    username = username.strip()
    if not username:
        raise ValueError("Error: username must not be empty.")
    if has_line_break(username):
        raise ValueError("Error: username must be a single line.")

    with open(get_file_path(store_root, CONFIG_FILE), 'w', newline='') as f:
        f.write(f"{username}\n")
    return username
