class ReleaseError(Exception):
    """Fatal condition that stops tag resolution or release creation."""


class InvalidScheme(ReleaseError):
    def __init__(self, scheme):
        super().__init__(f"Unsupported version scheme: {scheme}")
        self.scheme = scheme


class UnparseableTag(ReleaseError):
    def __init__(self, tag):
        super().__init__(f"Failed to parse tag: {tag}")
        self.tag = tag


class UnsupportedBumpType(ReleaseError):
    def __init__(self, bump, accepted):
        super().__init__(
            f"Unsupported semantic version type {bump}. Must be one of ({', '.join(accepted)})"
        )
        self.bump = bump


class IncrementFailure(ReleaseError):
    def __init__(self, cause):
        super().__init__(f"Failed to compute next semantic tag: {cause}")
        self.cause = cause
