"""word_document_parser.py

Holds WordDocumentParser class using docx2txt for text extraction.
"""
import docx2txt

from resume_engine.exceptions import FileOpenError
from resume_engine.parse_classes.file_parser.file_parser import FileParser


class WordDocumentParser(FileParser):
    """
    Concrete parser for Microsoft Word documents (.docx).

    ``docx2txt`` also picks up text inside textboxes, which many resume
    templates use for the contact block.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): Only ``.docx``.
    """

    SUPPORTED_EXTENSIONS = ['.docx']

    def _read_raw_text(self) -> str:
        try:
            full_text = docx2txt.process(self.file_path)
        except Exception as e:
            raise FileOpenError(self.file_path, str(e))

        return full_text or ""
