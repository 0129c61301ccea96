"""Utility functions: e-mail syntax check, text dedent, argument splitting."""

from email_validator import EmailNotValidError, validate_email


def is_valid_email(address: str) -> bool:
    """Return True if address is a syntactically valid e-mail address.

    Quoted local parts and IP-literal domains are accepted; no DNS lookup
    is made.
    """
    try:
        validate_email(
            address,
            check_deliverability=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
        )
    except EmailNotValidError:
        return False
    return True


def dedent_block(text: str) -> str:
    """Dedent a block of text, preserving relative indentation."""
    lines = text.split("\n")
    if len(lines) == 1:
        return text.strip()
    # The first line follows the tag name, so only continuation lines count
    indents = [
        len(line) - len(line.lstrip())
        for line in lines[1:]
        if line.strip()
    ]
    min_indent = min(indents) if indents else 0
    dedented = [lines[0].strip()] + [line[min_indent:].rstrip() for line in lines[1:]]
    return "\n".join(dedented).strip()


def split_arguments(argument_list: str) -> list[str]:
    """Split a raw argument list on commas and trim each piece.

    Commas are not nesting-aware: ``array<int, string> $x`` splits in two.
    """
    if not argument_list.strip():
        return []
    return [piece.strip() for piece in argument_list.split(",")]
