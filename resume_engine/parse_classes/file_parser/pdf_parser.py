"""pdf_parser.py

Holds PDFParser class.
"""
import pymupdf

from resume_engine.exceptions import FileOpenError
from resume_engine.parse_classes.file_parser.file_parser import FileParser

class PDFParser(FileParser):
    """
    Concrete parser for PDF documents (.pdf).

    Uses PyMuPDF to pull the text layer page by page. Layout is not
    reconstructed; each text line of the PDF becomes one resume line.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): Only ``.pdf``.
    """
    SUPPORTED_EXTENSIONS = ['.pdf']

    def _read_raw_text(self) -> str:
        """
        Open the PDF with PyMuPDF and join the text of all pages.

        Raises:
            FileOpenError: If the PDF file cannot be opened.
        """
        try:
            doc = pymupdf.open(self.file_path)
        except Exception as e:
            raise FileOpenError(self.file_path, str(e))

        try:
            page_texts = [
                doc.load_page(page_number).get_text("text")
                for page_number in range(doc.page_count)
            ]
        finally:
            doc.close()

        return "\n".join(page_texts)
