"""Interactive step of the OAuth2 authorization-code flow."""

import sys
from typing import Callable, Optional, TextIO

from ..errors import AuthenticationError

# Takes the authorization URL, returns the code the user pasted back.
AuthorizationPrompt = Callable[[str], str]


def console_prompt(
    authorization_url: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> str:
    """
    Show the authorization URL and block until the user types the code.

    Args:
        authorization_url: URL the user must open in a browser
        stdin: Stream to read the code from (defaults to sys.stdin)
        stdout: Stream to print the URL to (defaults to sys.stdout)

    Returns:
        The first whitespace-delimited token the user entered

    Raises:
        AuthenticationError: on EOF or empty input
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(
        "Go to the following link in your browser then type the "
        f"authorization code: \n{authorization_url}\n"
    )
    stdout.flush()

    line = stdin.readline()
    parts = line.split()
    if not parts:
        raise AuthenticationError("Unable to read authorization code")
    return parts[0]
