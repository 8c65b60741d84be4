"""check_file_extension.py
Checks a file's extension against the extensions a parser can read.
"""

import os

from resume_engine.exceptions import FileNotSupportedError

def check_file_extension(file_path: str, supported_extensions: list[str]) -> str:
    """
    Validate and return the lowercase file extension for a given file path.
    The longest matching extension wins, so '.tar.gz' style names work.
    """
    file_name = os.path.basename(file_path).lower()

    for ext in sorted(supported_extensions, key=len, reverse=True):
        if file_name.endswith(ext.lower()):
            return ext.lower()

    ext = os.path.splitext(file_name)[1]
    raise FileNotSupportedError(
        extension=ext,
        supported_extensions=supported_extensions,
        context="Failed in check_file_extension() call."
    )
