"""GitHub token loading."""

from pathlib import Path

from dependabot_approve.exceptions import ConfigurationError


def load_token(api_key: str | None = None, key_path: str | Path | None = None) -> str:
    """
    Resolve the GitHub token from exactly one source.

    Args:
        api_key: The token itself
        key_path: Path to a file holding the token

    Returns:
        The token with surrounding whitespace removed

    Raises:
        ConfigurationError: If neither or both sources are given, the file
            cannot be read, or the token is empty
    """
    if api_key is not None and key_path is not None:
        raise ConfigurationError("only one of api key (-a) or api key file path (-k) may be given")

    if api_key is not None:
        token = api_key.strip()
    elif key_path is not None:
        try:
            token = Path(key_path).read_text(encoding="utf-8").strip()
        except OSError as e:
            raise ConfigurationError(f"could not read api key file {key_path}: {e}") from e
    else:
        raise ConfigurationError("either api key (-a) or api key file path (-k) is required")

    if not token:
        raise ConfigurationError("the api key is empty")
    return token
