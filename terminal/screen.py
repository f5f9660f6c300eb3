"""
Terminal screen helpers.
"""

import os
import subprocess


def clear_screen():
    """Clear the terminal window (cls on Windows, clear elsewhere)."""
    command = "cls" if os.name == "nt" else "clear"
    # cls is a cmd builtin, so it needs a shell
    subprocess.run(command, shell=True, check=False)
