def require(collaborator, name: str):
    """Return ``collaborator`` or fail fast when it was not provided."""
    if collaborator is None:
        raise ValueError(f'{name} is required.')
    return collaborator
