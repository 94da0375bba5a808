class Error:
    def __init__(self, message: str, path: list[str | int] | None = None, extensions: dict | None = None):
        self.message = message
        self.path = path
        self.extensions = extensions

    def to_dict(self) -> dict:
        result = {"message": self.message}
        if self.path is not None:
            result["path"] = self.path
        if self.extensions is not None:
            result["extensions"] = self.extensions
        return result

    def __eq__(self, other):
        if isinstance(other, Error):
            return self.__dict__ == other.__dict__
        return False

    def __repr__(self):
        return f"Error({self.__dict__})"
