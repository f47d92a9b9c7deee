import re
from textwrap import dedent

SENSITIVE_THINGS = {
    "password",
    "passwd",
    "client_secret",
    "code",
    "authorization",
    "access_token",
    "refresh_token",
    "id_token",
    "token",
    "jwt",
}

REPLACEMENT = "<REDACTED>"

SANITIZE_PATTERN = r"""
    (?<!\w) # Negative-lookbehind for word characters.
    # Necessary to keep 'authorization_code' from matching 'code'
    ( # Start of capturing group--we'll keep this bit.
         (?: # non-capturing group
             {} # Template-in things we want to sanitize
         ) #
        \s* # Maybe some whitespace
        = # Query string format
        \s* # Maybe more whitespace
    ) # End of capturing group
    (?:[^&#\s]+) # This is the bit we replace with '<REDACTED>'
"""

SANITIZE_PATTERN = dedent(SANITIZE_PATTERN.format("|".join(SENSITIVE_THINGS)))
SANITIZE_REGEX = re.compile(SANITIZE_PATTERN, re.VERBOSE | re.IGNORECASE | re.UNICODE)

# user:password@ in the authority part
USERINFO_REGEX = re.compile(r"(//[^/@:]*:)[^/@]*@")


def sanitize(url):
    """
    Strip credentials from a URL before it is written to a log.

    :param url: URL string (anything else is converted with str())
    :return: the URL with token values and userinfo passwords redacted
    """
    if not isinstance(url, str):
        url = str(url)
    url = USERINFO_REGEX.sub(r"\1{}@".format(REPLACEMENT), url)
    return SANITIZE_REGEX.sub(r"\1{}".format(REPLACEMENT), url)
