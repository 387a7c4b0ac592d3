from .filenames import safe_filename

__all__ = ["safe_filename"]
